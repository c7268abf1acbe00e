import logging

from sqlalchemy.exc import SQLAlchemyError

from src import config
from src.db.database import SessionLocal, ParkDB, AlertDB, save
from src.errors import ParkSyncError, PersistError
from src.http_client import fetch_json
from src.models.park import AlertList

logger = logging.getLogger(__name__)


def fetch_park_alerts(park_code):
    api_key = config.require_setting("NPS_API_KEY")
    alerts = fetch_json(
        f"{config.NPS_API_URL}/alerts",
        params={"parkCode": park_code, "api_key": api_key},
        model=AlertList
    )
    return alerts.data


def delete_all_alerts(db):
    try:
        deleted = db.query(AlertDB).delete()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise PersistError(f"Could not clear alerts: {e}") from e
    logger.info(f"Deleted {deleted} existing alerts")
    return deleted


def fetch_alerts(db=None):
    """
    Rebuild the alert table from the current NPS alerts of every stored park.

    Existing alerts are deleted first; the table is empty until parks are
    refetched. A park whose alerts cannot be fetched is logged and skipped.
    Returns the number of alerts stored.
    """
    config.require_setting("NPS_API_KEY")
    owns_session = db is None
    db = db or SessionLocal()
    stored = 0

    try:
        delete_all_alerts(db)

        parks = db.query(ParkDB).order_by(ParkDB.id).all()
        for park in parks:
            try:
                alerts = fetch_park_alerts(park.park_code)
            except ParkSyncError as e:
                logger.error(f"Failed to fetch alerts for park {park.park_code}: {e}")
                continue

            for alert in alerts:
                record = AlertDB(
                    park_id=park.id,
                    title=alert.title,
                    description=alert.description,
                    category=alert.category,
                    url=alert.url
                )
                try:
                    save(db, record)
                except PersistError as e:
                    logger.error(f"Failed to save alert for park {park.park_code}: {e}")
                    continue
                stored += 1
            logger.info(f"Saved {len(alerts)} alerts for park {park.park_code}")
    finally:
        if owns_session:
            db.close()

    logger.info(f"Alert refresh stored {stored} alerts")
    return stored
