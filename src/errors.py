"""
Error Module
-----------
Exception hierarchy for the ingestion pipeline. Catalog-level errors abort
a job; per-entity errors are logged by the job and skipped.
"""


class ParkSyncError(Exception):
    """Base exception for all pipeline failures."""


class ConfigError(ParkSyncError):
    """Raised when a required setting or credential is missing."""


class FetchError(ParkSyncError):
    """Raised on network failure or a non-2xx upstream response."""


class DecodeError(ParkSyncError):
    """Raised when a JSON payload or image cannot be decoded."""


class ParseError(ParkSyncError):
    """Raised when a numeric field cannot be coerced."""


class PersistError(ParkSyncError):
    """Raised when a record cannot be saved."""
