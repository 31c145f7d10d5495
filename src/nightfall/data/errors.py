"""Exceptions raised while loading and validating scene content."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when a content file is missing, unreadable, or not JSON."""


class DataValidationError(DataError):
    """Raised when a content file has the wrong structure or field types."""


class DataReferenceError(DataError):
    """Raised when the scene graph points at scenes that do not exist."""
