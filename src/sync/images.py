import logging

from src.db.database import save
from src.errors import ParkSyncError, PersistError
from src.media.dedup import is_duplicate
from src.media.transcoder import download_and_resize_image

logger = logging.getLogger(__name__)


def ingest_images(db, record, urls, storage, max_width):
    """
    Download, transcode and attach every URL not already stored on the record.

    The record is committed after each appended image, so a later failure
    keeps the earlier ones. A failing image is logged and skipped.
    Returns the number of images added.
    """
    collection = record.__tablename__
    added = 0

    for url in urls:
        if is_duplicate(url, record.images or []):
            continue
        try:
            encoded = download_and_resize_image(url, max_width)
        except ParkSyncError as e:
            logger.warning(f"Error resizing image {url}: {e}")
            continue

        try:
            name = storage.save(collection, record.id, url, encoded.data)
        except (ParkSyncError, OSError) as e:
            logger.error(f"Error storing image {url}: {e}")
            continue

        record.images = [*(record.images or []), name]
        try:
            save(db, record)
        except PersistError as e:
            logger.error(f"Error saving record with image {url}: {e}")
            storage.delete(collection, record.id, name)
            continue

        added += 1
        logger.info(f"Adding img to {collection} {record.id}: {encoded.size / 1024.0:.1f} kb")

    return added
