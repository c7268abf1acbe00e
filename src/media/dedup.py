import posixpath
import re
from urllib.parse import urlsplit

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_NON_WORD = re.compile(r"[^a-z0-9]+")


def snakecase(value):
    """Lower-case a token and join its words with single underscores."""
    value = _CAMEL_BOUNDARY.sub(r"\1_\2", value)
    return _NON_WORD.sub("_", value.lower()).strip("_")


def url_stem(url):
    """File name of a URL without directory or extension."""
    filename = posixpath.basename(urlsplit(url).path)
    stem, _ = posixpath.splitext(filename)
    return stem


def candidate_key(url):
    return snakecase(url_stem(url))


def existing_key(stored_name):
    # Drop the storage-assigned suffix after the last underscore
    head, sep, _ = stored_name.rpartition("_")
    return head if sep else stored_name


def is_duplicate(url, stored_names):
    """
    Check whether an image URL has already been ingested for an entity.

    The candidate key is the snake-cased file stem of the URL; it matches a
    stored name whose text up to its last underscore is identical.
    """
    key = candidate_key(url)
    return any(key == existing_key(name) for name in stored_names)
