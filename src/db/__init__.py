"""
Database Module
-------------
Handles database connections, ORM models, and database operations.
Uses SQLAlchemy and defines the schema for parks, campgrounds and alerts.
"""
