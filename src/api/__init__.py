"""
API Module
---------
Provides RESTful API endpoints for the national park data using FastAPI.
Features include:
- Triggering park, weather and alert synchronization on demand
- Retrieving parks with their forecast and alerts
- Retrieving campgrounds and alerts per park
"""
