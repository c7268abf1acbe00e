"""Fake upstream HTTP responses and image payloads for tests."""
import io

import requests
from PIL import Image

NPS = "https://developer.nps.gov/api/v1"
OWM = "https://api.openweathermap.org/data/3.0/onecall"
MAPBOX = "https://api.mapbox.com/styles/v1/mapbox/outdoors-v12/static"


def make_image_bytes(width, height, fmt="JPEG", mode="RGB"):
    color = (30, 120, 60) if mode == "RGB" else (30, 120, 60, 128)
    buffer = io.BytesIO()
    Image.new(mode, (width, height), color=color).save(buffer, format=fmt)
    return buffer.getvalue()


class FakeResponse:
    def __init__(self, status_code=200, json_data=None, content=b""):
        self.status_code = status_code
        self._json = json_data
        self.content = content

    def json(self):
        if self._json is None:
            raise ValueError("No JSON object could be decoded")
        return self._json


class FakeUpstream:
    """Stands in for requests.get; routes by URL prefix and query parameters."""

    def __init__(self):
        self.routes = []
        self.calls = []

    def add(self, prefix, response, **params):
        # Later routes take precedence
        self.routes.insert(0, (prefix, params, response))

    def json(self, prefix, payload, status_code=200, **params):
        self.add(prefix, FakeResponse(status_code, json_data=payload), **params)

    def image(self, prefix, content, status_code=200, **params):
        self.add(prefix, FakeResponse(status_code, content=content), **params)

    def fail(self, prefix, **params):
        self.add(prefix, requests.ConnectionError("connection refused"), **params)

    def calls_to(self, prefix):
        return [call for call in self.calls if call[0].startswith(prefix)]

    def __call__(self, url, params=None, headers=None, timeout=None):
        params = params or {}
        self.calls.append((url, params))
        for prefix, expected, response in self.routes:
            if url.startswith(prefix) and all(params.get(k) == v for k, v in expected.items()):
                if isinstance(response, Exception):
                    raise response
                return response
        return FakeResponse(404)
