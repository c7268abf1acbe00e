"""
HTTP Module
----------
Blocking fetch helpers shared by every upstream client. There is no retry:
a failed request is attempted again on the next run of the job.
"""
import logging

import requests
from pydantic import ValidationError

from src import config
from src.errors import FetchError, DecodeError

logger = logging.getLogger(__name__)

USER_AGENT = "ParkSync/1.0"


def _get(url, params=None):
    try:
        response = requests.get(
            url,
            params=params,
            headers={"User-Agent": USER_AGENT},
            timeout=config.REQUEST_TIMEOUT
        )
    except requests.RequestException as e:
        raise FetchError(f"Request to {url} failed: {e}") from e

    if not 200 <= response.status_code < 300:
        raise FetchError(f"HTTP {response.status_code} from {url}")
    return response


def fetch_bytes(url, params=None):
    return _get(url, params).content


def fetch_json(url, params=None, model=None):
    """
    GET a JSON document and optionally validate it against a pydantic model.

    Raises:
        FetchError: network failure or non-2xx status
        DecodeError: body is not JSON or does not match the model
    """
    response = _get(url, params)
    try:
        payload = response.json()
    except ValueError as e:
        raise DecodeError(f"Invalid JSON from {url}: {e}") from e

    if model is None:
        return payload
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        logger.error(f"Validation error for payload from {url}: {e.errors()}")
        raise DecodeError(f"Unexpected payload from {url}") from e
