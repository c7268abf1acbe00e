"""Tests for the on-disk image store."""
import os

import pytest

from src.errors import PersistError
from src.media.storage import FileStorage


def test_save_writes_under_collection_and_record(storage):
    name = storage.save("parks", 7, "https://example.com/Old-Faithful.jpg", b"jpeg-bytes")

    assert name.startswith("old_faithful_")
    with open(storage.path_for("parks", 7, name), "rb") as f:
        assert f.read() == b"jpeg-bytes"


def test_unwritable_root_raises_persist_error(tmp_path):
    blocker = tmp_path / "media"
    blocker.write_bytes(b"not a directory")
    storage = FileStorage(str(blocker))

    with pytest.raises(PersistError):
        storage.save("parks", 1, "https://example.com/a.jpg", b"data")


def test_delete_removes_file(storage):
    name = storage.save("campgrounds", 3, "map.png", b"png", extension=".png")

    storage.delete("campgrounds", 3, name)

    assert not os.path.exists(storage.path_for("campgrounds", 3, name))
