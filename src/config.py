"""
Configuration Module
------------------
Reads runtime settings from the environment (optionally populated from a
.env file) and configures logging for jobs and the API.
"""
import os
import logging
from datetime import datetime

from dotenv import load_dotenv

from src.errors import ConfigError

load_dotenv()

# Upstream endpoints
NPS_API_URL = "https://developer.nps.gov/api/v1"
OWM_API_URL = "https://api.openweathermap.org/data/3.0/onecall"
OWM_ICON_URL = "https://openweathermap.org/img/wn/{icon}@2x.png"
MAPBOX_STATIC_URL = "https://api.mapbox.com/styles/v1/mapbox/outdoors-v12/static"

# Only these designations are synchronized
ACCEPTED_DESIGNATIONS = ("National Park", "National Park & Preserve")

PARK_CATALOG_LIMIT = 500

DB_URL = os.getenv("DB_URL", "sqlite:///./parks.db")
MEDIA_ROOT = os.getenv("MEDIA_ROOT", "./media")
LOG_DIR = os.getenv("LOG_DIR", "./logs")
MAX_IMAGE_WIDTH = int(os.getenv("MAX_IMAGE_WIDTH", "1500"))
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))
ENABLE_SCHEDULER = os.getenv("ENABLE_SCHEDULER", "false").lower() in ("1", "true", "yes")


def require_setting(name):
    """Return a required credential from the environment or raise ConfigError."""
    value = os.getenv(name)
    if not value:
        raise ConfigError(f"{name} environment variable is not set")
    return value


def configure_logging(log_dir=None, level=logging.INFO):
    log_dir = log_dir or LOG_DIR
    os.makedirs(log_dir, exist_ok=True)

    # Create log file with today's date
    log_filename = os.path.join(log_dir, f'parksync_{datetime.now().strftime("%Y%m%d")}.log')

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_filename),
            logging.StreamHandler()
        ]
    )
