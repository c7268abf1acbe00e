"""Tests for filename-based image deduplication."""
from src.media.dedup import snakecase, candidate_key, existing_key, is_duplicate
from src.media.storage import stored_name_for


def test_stored_name_with_suffix_is_duplicate():
    assert is_duplicate("https://www.nps.gov/common/uploads/yosemite_valley.jpg", ["yosemite_valley_001"])


def test_different_filename_is_new():
    assert not is_duplicate("https://www.nps.gov/common/uploads/half_dome.jpg", ["yosemite_valley_001"])


def test_candidate_key_is_canonicalized():
    assert candidate_key("https://example.com/a/b/Half-Dome%20View.JPG") == "half_dome_20_view"
    assert candidate_key("https://example.com/img/ElCapitan.png?width=800") == "el_capitan"
    assert snakecase("  Glacier Point--Sunset ") == "glacier_point_sunset"


def test_existing_key_strips_last_underscore_segment():
    assert existing_key("el_capitan_k3j9x0a1b2.jpg") == "el_capitan"
    assert existing_key("nounderscore") == "nounderscore"


def test_malformed_url_matches_nothing():
    assert candidate_key("not a url/") == ""
    assert not is_duplicate("not a url/", ["yosemite_valley_001", "half_dome_abc"])


def test_empty_store_means_everything_is_new():
    assert not is_duplicate("https://example.com/anything.jpg", [])


def test_names_from_storage_round_trip_through_dedup():
    name = stored_name_for("https://example.com/photos/Tunnel-View.jpeg", ".jpg")
    assert name.startswith("tunnel_view_")
    assert name.endswith(".jpg")
    assert is_duplicate("https://cdn.example.org/other/path/Tunnel-View.jpeg", [name])
