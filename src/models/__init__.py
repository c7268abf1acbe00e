"""
Data Models Module
----------------
Contains Pydantic models for the upstream NPS and OpenWeather payloads and
the weather value object stored on each park.
"""
