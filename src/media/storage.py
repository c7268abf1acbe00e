import os
import secrets
import string

from src.errors import PersistError
from src.media.dedup import snakecase, url_stem

SUFFIX_ALPHABET = string.ascii_lowercase + string.digits
SUFFIX_LENGTH = 10


def stored_name_for(source_name, extension):
    """Normalized file name with a random suffix, e.g. half_dome_k3j9x0a1b2.jpg"""
    stem = snakecase(url_stem(source_name)) or "file"
    suffix = "".join(secrets.choice(SUFFIX_ALPHABET) for _ in range(SUFFIX_LENGTH))
    return f"{stem}_{suffix}{extension}"


class FileStorage:
    """Stores image binaries under <root>/<collection>/<record id>/<name>."""

    def __init__(self, root):
        self.root = root

    def path_for(self, collection, record_id, name):
        return os.path.join(self.root, collection, str(record_id), name)

    def save(self, collection, record_id, source_name, data, extension=".jpg"):
        name = stored_name_for(source_name, extension)
        path = self.path_for(collection, record_id, name)
        try:
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with open(path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise PersistError(f"Could not write {path}: {e}") from e
        return name

    def delete(self, collection, record_id, name):
        path = self.path_for(collection, record_id, name)
        if os.path.exists(path):
            os.remove(path)
