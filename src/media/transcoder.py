import io
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

from src.errors import DecodeError
from src.http_client import fetch_bytes


@dataclass
class EncodedImage:
    data: bytes
    width: int
    height: int

    @property
    def size(self):
        return len(self.data)


def decode_image(payload):
    try:
        image = Image.open(io.BytesIO(payload))
        image.load()
    except (UnidentifiedImageError, OSError) as e:
        raise DecodeError(f"Could not decode image: {e}") from e
    return image


def resize_to_width(image, max_width):
    """Scale an image down to max_width (nearest neighbour), keeping aspect ratio."""
    width, height = image.size
    if width <= max_width:
        return image
    new_height = max(1, height * max_width // width)
    return image.resize((max_width, new_height), Image.Resampling.NEAREST)


def transcode(payload, max_width):
    """Decode raw image bytes, bound the width, and re-encode as JPEG."""
    image = resize_to_width(decode_image(payload), max_width)
    # JPEG has no alpha channel, so transparency is dropped here
    image = image.convert("RGB")

    buffer = io.BytesIO()
    image.save(buffer, format="JPEG")
    return EncodedImage(data=buffer.getvalue(), width=image.width, height=image.height)


def download_and_resize_image(url, max_width):
    """
    Download an image and return it re-encoded as a width-bounded JPEG.

    Raises:
        FetchError: the download failed
        DecodeError: the payload is not a supported image
    """
    return transcode(fetch_bytes(url), max_width)
