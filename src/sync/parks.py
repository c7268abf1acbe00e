import logging
import time

from src import config
from src.db.database import SessionLocal, ParkDB, save
from src.errors import ParkSyncError
from src.http_client import fetch_json
from src.media.storage import FileStorage
from src.models.park import ParkCatalog
from src.sync.campgrounds import fetch_campgrounds
from src.sync.images import ingest_images
from src.sync.merge import merge_park

logger = logging.getLogger(__name__)


def get_parks():
    api_key = config.require_setting("NPS_API_KEY")
    catalog = fetch_json(
        f"{config.NPS_API_URL}/parks",
        params={"limit": config.PARK_CATALOG_LIMIT, "api_key": api_key},
        model=ParkCatalog
    )
    logger.info(f"Retrieved {len(catalog.data)} entries from the park catalog")
    return catalog.data


def is_national_park(park):
    return park.designation in config.ACCEPTED_DESIGNATIONS


def sync_park(db, park, storage, max_width):
    """Upsert one park, ingest its images and refresh its campgrounds."""
    existing = db.query(ParkDB).filter(ParkDB.park_code == park.park_code).first()
    record = merge_park(existing, park)
    save(db, record)

    ingest_images(db, record, park.image_urls, storage, max_width)
    logger.info(f"Park {park.park_code} has {len(record.images or [])} images")

    try:
        camp_count = fetch_campgrounds(db, record.id, park.park_code, storage, max_width)
    except ParkSyncError as e:
        logger.error(f"Error fetching campgrounds for park {park.park_code}: {e}")
        return existing is None, False

    record.campgrounds = camp_count
    save(db, record)
    return existing is None, True


def fetch_and_store_national_parks(db=None, storage=None, max_width=None):
    """
    Pull the NPS park catalog and upsert every national park it lists.

    Args:
        db: Database session; a new one is opened and closed if omitted
        storage: FileStorage for images; defaults to MEDIA_ROOT
        max_width: Maximum width of stored photos

    Returns:
        Summary dict with counts of parks seen, inserted, updated and failed

    Raises:
        ConfigError: a required credential is missing
        FetchError, DecodeError: the park catalog could not be retrieved
    """
    config.require_setting("MAPBOX_ACCESS_TOKEN")
    storage = storage or FileStorage(config.MEDIA_ROOT)
    max_width = max_width or config.MAX_IMAGE_WIDTH

    owns_session = db is None
    db = db or SessionLocal()
    start_time = time.time()
    summary = {"parks": 0, "inserted": 0, "updated": 0, "campground_errors": 0, "errors": 0}

    try:
        parks = [park for park in get_parks() if is_national_park(park)]
        logger.info(f"Synchronizing {len(parks)} national parks")

        for park in parks:
            summary["parks"] += 1
            try:
                created, campgrounds_ok = sync_park(db, park, storage, max_width)
            except ParkSyncError as e:
                summary["errors"] += 1
                logger.error(f"Error synchronizing park {park.park_code}: {e}")
                continue

            summary["inserted" if created else "updated"] += 1
            if not campgrounds_ok:
                summary["campground_errors"] += 1
    finally:
        if owns_session:
            db.close()

    duration = time.time() - start_time
    logger.info("Park sync summary:")
    logger.info(f"  Total runtime: {duration:.2f} seconds")
    logger.info(f"  Parks processed: {summary['parks']}")
    logger.info(f"  Inserted: {summary['inserted']}")
    logger.info(f"  Updated: {summary['updated']}")
    logger.info(f"  Campground errors: {summary['campground_errors']}")
    logger.info(f"  Park errors: {summary['errors']}")
    return summary
