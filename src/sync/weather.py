import logging
from datetime import datetime, timezone

from src import config
from src.db.database import SessionLocal, ParkDB, save
from src.errors import ParkSyncError
from src.http_client import fetch_json
from src.models.weather import OneCallResponse, WeatherDate

logger = logging.getLogger(__name__)

KELVIN_OFFSET = 273.15


def kelvin_to_fahrenheit(kelvin):
    return f"{(kelvin - KELVIN_OFFSET) * 1.8 + 32:.1f}"


def kelvin_to_celsius(kelvin):
    return f"{kelvin - KELVIN_OFFSET:.1f}"


def format_date(timestamp):
    day = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return f"{day:%b} {day.day}"


def icon_url(icon):
    return config.OWM_ICON_URL.format(icon=icon) if icon else ""


def to_weather_dates(forecast, now=None):
    """Convert a One Call response into per-day entries, in upstream order."""
    last_updated = (now or datetime.now(timezone.utc)).isoformat(timespec="seconds")
    return [
        WeatherDate(
            date=format_date(daily.dt),
            temperature_day_f=kelvin_to_fahrenheit(daily.temp.day),
            temperature_day_c=kelvin_to_celsius(daily.temp.day),
            temperature_night_f=kelvin_to_fahrenheit(daily.temp.night),
            temperature_night_c=kelvin_to_celsius(daily.temp.night),
            weather_icon=icon_url(daily.weather[0].icon if daily.weather else ""),
            last_updated=last_updated
        )
        for daily in forecast.daily
    ]


def get_forecast(latitude, longitude):
    """Fetch the daily forecast for a coordinate pair."""
    api_key = config.require_setting("OWM_API_KEY")
    forecast = fetch_json(
        config.OWM_API_URL,
        params={"lat": latitude, "lon": longitude, "exclude": "minutely,hourly", "appid": api_key},
        model=OneCallResponse
    )
    return to_weather_dates(forecast)


def fetch_and_store_weather(db=None):
    """
    Replace the stored forecast of every park.

    A park whose forecast cannot be fetched or saved is logged and skipped.
    Returns the number of parks updated.
    """
    config.require_setting("OWM_API_KEY")
    owns_session = db is None
    db = db or SessionLocal()
    updated = 0

    try:
        parks = db.query(ParkDB).order_by(ParkDB.id).all()
        for park in parks:
            try:
                weather = get_forecast(park.latitude, park.longitude)
                park.weather = [day.model_dump(by_alias=True) for day in weather]
                save(db, park)
            except ParkSyncError as e:
                logger.error(f"Failed to fetch weather for park {park.park_code}: {e}")
                continue
            updated += 1
            logger.info(f"Weather data saved for park {park.park_code}")
    finally:
        if owns_session:
            db.close()

    logger.info(f"Weather updated for {updated} parks")
    return updated
