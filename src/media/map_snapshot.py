import io
import logging

from src import config
from src.http_client import fetch_bytes
from src.media.transcoder import decode_image

logger = logging.getLogger(__name__)

FIRST_COME_PIN_COLOR = "65a30d"
RESERVABLE_PIN_COLOR = "e85151"
MAP_ZOOM = 15.2
MAP_BEARING = 0
MAP_SIZE = "768x384@2x"


def build_map_url(latitude, longitude, first_come):
    color = FIRST_COME_PIN_COLOR if first_come else RESERVABLE_PIN_COLOR
    return (
        f"{config.MAPBOX_STATIC_URL}/pin-l+{color}({longitude},{latitude})"
        f"/{longitude},{latitude},{MAP_ZOOM},{MAP_BEARING}/{MAP_SIZE}"
    )


def get_map_image(latitude, longitude, first_come):
    """Fetch a static map pinned at the given coordinates and return it as PNG bytes."""
    access_token = config.require_setting("MAPBOX_ACCESS_TOKEN")
    url = build_map_url(latitude, longitude, first_come)

    image = decode_image(fetch_bytes(url, params={"access_token": access_token}))

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    logger.info(f"Fetched map image for ({latitude}, {longitude})")
    return buffer.getvalue()
