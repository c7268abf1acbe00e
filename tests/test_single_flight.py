"""Tests for the single-flight guard and the weekly trigger."""
import threading
from datetime import datetime

import pytest

from src.sync import scheduler
from src.sync.scheduler import WeeklyTrigger, next_weekly_run, run_park_sync
from src.sync.single_flight import SingleFlight


def blocking_job(calls, started, release):
    def job(**kwargs):
        calls.append(kwargs)
        started.set()
        release.wait(5)
        return {"parks": 0}
    return job


def test_concurrent_call_is_a_noop():
    guard = SingleFlight("test job")
    calls, started, release = [], threading.Event(), threading.Event()
    results = []

    worker = threading.Thread(target=lambda: results.append(guard.run(blocking_job(calls, started, release))))
    worker.start()
    assert started.wait(5)

    second = guard.run(blocking_job(calls, started, release))
    release.set()
    worker.join(5)

    assert second == (False, None)
    assert results == [(True, {"parks": 0})]
    assert len(calls) == 1
    assert not guard.running


def test_guard_is_released_after_failure():
    guard = SingleFlight("test job")

    def failing():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        guard.run(failing)

    assert not guard.running
    assert guard.run(lambda: "again") == (True, "again")


def test_try_acquire_and_release():
    guard = SingleFlight("test job")

    assert guard.try_acquire()
    assert not guard.try_acquire()
    guard.release()
    assert guard.try_acquire()


def test_run_park_sync_skips_overlapping_call(monkeypatch):
    calls, started, release = [], threading.Event(), threading.Event()
    monkeypatch.setattr(scheduler, "fetch_and_store_national_parks", blocking_job(calls, started, release))
    results = []

    worker = threading.Thread(target=lambda: results.append(run_park_sync()))
    worker.start()
    assert started.wait(5)

    assert run_park_sync() is None
    release.set()
    worker.join(5)

    assert results == [{"parks": 0}]
    assert len(calls) == 1


@pytest.mark.parametrize("now, expected", [
    (datetime(2024, 5, 1, 10, 30), datetime(2024, 5, 5, 0, 0)),   # Wednesday
    (datetime(2024, 5, 5, 0, 0), datetime(2024, 5, 12, 0, 0)),    # Sunday midnight exactly
    (datetime(2024, 5, 5, 9, 0), datetime(2024, 5, 12, 0, 0)),    # Sunday morning
    (datetime(2024, 5, 4, 23, 59), datetime(2024, 5, 5, 0, 0)),   # Saturday night
])
def test_next_weekly_run(now, expected):
    assert next_weekly_run(now) == expected


def test_weekly_trigger_stops_without_running_job():
    calls = []
    trigger = WeeklyTrigger(job=lambda: calls.append(1))

    trigger.start()
    trigger.stop()

    assert calls == []
    assert trigger._thread is None
