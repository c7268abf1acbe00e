"""
Synchronization Module
--------------------
Jobs that pull parks, campgrounds, weather and alerts from upstream APIs
and merge them into the database.
Features include:
- Designation-filtered park upserts keyed by park code
- Campground upserts keyed by campground id, with map snapshots
- Image ingestion with filename-based deduplication
- Weekly scheduling behind a single-flight guard
"""
