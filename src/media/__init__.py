"""
Media Module
-----------
Image ingestion for parks and campgrounds: filename-based deduplication,
download and re-encode of photos, static map snapshots, and the on-disk
file store that holds the resulting binaries.
"""
