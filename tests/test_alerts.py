"""Tests for the alert refresher."""
import pytest

from src.db.database import AlertDB, ParkDB
from src.errors import ConfigError
from src.sync.alerts import fetch_alerts
from tests.fakes import NPS


def alert(title, category="Caution"):
    return {"id": title, "title": title, "description": f"{title} details", "category": category,
            "url": f"https://www.nps.gov/{title}"}


@pytest.fixture
def parks(db):
    yose = ParkDB(park_code="yose", name="Yosemite", images=[])
    zion = ParkDB(park_code="zion", name="Zion", images=[])
    db.add_all([yose, zion])
    db.commit()
    db.add(AlertDB(park_id=yose.id, title="Last week's closure", category="Park Closure"))
    db.commit()
    return yose, zion


def stored_alerts(db):
    return {(a.park.park_code, a.title, a.category) for a in db.query(AlertDB).all()}


def test_refresh_replaces_alert_set(db, parks, upstream):
    upstream.json(f"{NPS}/alerts", {"data": [alert("Tioga Road closed", "Park Closure"), alert("Smoke")]},
                  parkCode="yose")
    upstream.json(f"{NPS}/alerts", {"data": [alert("Flash floods", "Danger")]}, parkCode="zion")

    stored = fetch_alerts(db=db)

    assert stored == 3
    assert stored_alerts(db) == {
        ("yose", "Tioga Road closed", "Park Closure"),
        ("yose", "Smoke", "Caution"),
        ("zion", "Flash floods", "Danger"),
    }


def test_park_fetch_failure_is_skipped(db, parks, upstream):
    upstream.json(f"{NPS}/alerts", {"data": [alert("Smoke")]}, parkCode="yose")
    upstream.fail(f"{NPS}/alerts", parkCode="zion")

    stored = fetch_alerts(db=db)

    assert stored == 1
    assert stored_alerts(db) == {("yose", "Smoke", "Caution")}


def test_missing_key_leaves_alerts_untouched(db, parks, upstream, monkeypatch):
    monkeypatch.delenv("NPS_API_KEY")

    with pytest.raises(ConfigError):
        fetch_alerts(db=db)
    assert db.query(AlertDB).count() == 1
