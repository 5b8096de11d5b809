"""
Custom exceptions for the application.
"""


class RecordError(Exception):
    """Base exception for record-related errors."""
    pass


class RecordNotFoundError(RecordError):
    """Raised when no row matches the requested key."""
    pass


class StoreError(RecordError):
    """Raised when the database rejects or fails a statement."""
    pass
