import logging

from src import config
from src.db.database import CampgroundDB, save
from src.errors import ParkSyncError
from src.http_client import fetch_json
from src.media.map_snapshot import get_map_image
from src.models.park import CampgroundList
from src.sync.images import ingest_images
from src.sync.merge import merge_campground

logger = logging.getLogger(__name__)


def get_campgrounds(park_code):
    api_key = config.require_setting("NPS_API_KEY")
    catalog = fetch_json(
        f"{config.NPS_API_URL}/campgrounds",
        params={"parkCode": park_code, "api_key": api_key},
        model=CampgroundList
    )
    logger.info(f"Retrieved {len(catalog.data)} campgrounds for park {park_code}")
    return catalog.data


def attach_map_image(db, record, storage):
    """Fetch and store a map snapshot for a campground that has none yet."""
    if record.map_image:
        return False
    try:
        # Parsed count, so an empty or unparsable value gets the reservable pin
        png = get_map_image(record.latitude, record.longitude, record.first_come_first_serve != 0)
    except ParkSyncError as e:
        logger.warning(f"Error getting map image for campground {record.camp_id}: {e}")
        return False

    try:
        name = storage.save(record.__tablename__, record.id, "map.png", png, extension=".png")
    except (ParkSyncError, OSError) as e:
        logger.error(f"Error storing map image for campground {record.camp_id}: {e}")
        return False

    record.map_image = name
    try:
        save(db, record)
    except ParkSyncError as e:
        logger.error(f"Error saving map image for campground {record.camp_id}: {e}")
        storage.delete(record.__tablename__, record.id, name)
        return False
    return True


def fetch_campgrounds(db, park_id, park_code, storage, max_width=None):
    """
    Upsert every campground the NPS API lists for one park.

    Args:
        db: Database session
        park_id: Primary key of the stored park the campgrounds belong to
        park_code: NPS park code used to query the API
        storage: FileStorage for images and map snapshots
        max_width: Maximum width of stored photos

    Returns:
        Number of campground entries returned by the API

    Raises:
        FetchError, DecodeError: the campground list could not be retrieved
    """
    max_width = max_width or config.MAX_IMAGE_WIDTH
    campgrounds = get_campgrounds(park_code)

    for campground in campgrounds:
        existing = db.query(CampgroundDB).filter(CampgroundDB.camp_id == campground.id).first()
        if existing is None:
            logger.info(f"Creating new record for campground {campground.id}")

        record = merge_campground(existing, campground, park_id)
        try:
            save(db, record)
        except ParkSyncError as e:
            logger.error(f"Error saving campground {campground.id}: {e}")
            continue

        ingest_images(db, record, campground.image_urls, storage, max_width)
        logger.info(f"Camp {record.camp_id} has {len(record.images or [])} images")

        attach_map_image(db, record, storage)

    return len(campgrounds)
