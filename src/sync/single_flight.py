import logging
import threading
from contextlib import contextmanager

logger = logging.getLogger(__name__)


class SingleFlight:
    """
    Allows at most one execution of a job at a time within the process.

    A caller that arrives while the job is running does not wait; it is
    told the slot is taken and returns immediately.
    """

    def __init__(self, name):
        self.name = name
        self._lock = threading.Lock()
        self._running = False

    @property
    def running(self):
        with self._lock:
            return self._running

    def try_acquire(self):
        with self._lock:
            if self._running:
                return False
            self._running = True
            return True

    def release(self):
        with self._lock:
            self._running = False

    @contextmanager
    def acquire(self):
        """Yield True if this caller holds the slot, False otherwise; always releases."""
        acquired = self.try_acquire()
        try:
            yield acquired
        finally:
            if acquired:
                self.release()

    def run(self, func, *args, **kwargs):
        """
        Call func unless another call is in flight.

        Returns (True, result) when it ran, (False, None) when it was skipped.
        """
        with self.acquire() as acquired:
            if not acquired:
                logger.info(f"{self.name} is already running, skipping")
                return False, None
            return True, func(*args, **kwargs)
