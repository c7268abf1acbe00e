import logging
import threading
from datetime import datetime, timedelta

from src.sync.parks import fetch_and_store_national_parks
from src.sync.single_flight import SingleFlight

logger = logging.getLogger(__name__)

# Sunday 00:00, i.e. cron "0 0 * * 0"
WEEKLY_RUN_WEEKDAY = 6
WEEKLY_RUN_HOUR = 0

park_sync_guard = SingleFlight("National Parks sync")


def run_park_sync(**kwargs):
    """
    Run the park sync unless one is already in flight.

    Returns the sync summary, or None when the call was skipped.
    """
    ran, summary = park_sync_guard.run(fetch_and_store_national_parks, **kwargs)
    if not ran:
        logger.info("National Parks data is already being fetched.")
        return None
    return summary


def next_weekly_run(now):
    days_ahead = (WEEKLY_RUN_WEEKDAY - now.weekday()) % 7
    candidate = (now + timedelta(days=days_ahead)).replace(
        hour=WEEKLY_RUN_HOUR, minute=0, second=0, microsecond=0
    )
    if candidate <= now:
        candidate += timedelta(days=7)
    return candidate


class WeeklyTrigger:
    """Daemon thread that runs the guarded park sync every Sunday at midnight."""

    def __init__(self, job=run_park_sync):
        self.job = job
        self._stop = threading.Event()
        self._thread = None

    def start(self):
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name="weekly-park-sync", daemon=True)
        self._thread.start()
        logger.info("Weekly park sync trigger started")

    def stop(self):
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=5)
            self._thread = None

    def _loop(self):
        while not self._stop.is_set():
            now = datetime.now()
            run_at = next_weekly_run(now)
            logger.info(f"Next scheduled park sync at {run_at.isoformat()}")
            if self._stop.wait((run_at - now).total_seconds()):
                break
            try:
                self.job()
            except Exception as e:
                logger.error(f"Scheduled park sync failed: {e}", exc_info=True)
