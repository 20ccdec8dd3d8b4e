"""Custom exceptions for data loading and validation."""


class DataError(Exception):
    """Base exception for the data layer."""

    code = "DATA_ERROR"


class DataLoadError(DataError):
    """Raised when JSON files are missing or invalid."""

    code = "SOURCE_ERROR"


class DataValidationError(DataError):
    """Raised when JSON content fails structural validation."""

    code = "INVALID_RECORD"


class MissingRequirementsError(DataValidationError):
    """Raised when a quest record defines no completion requirements."""

    code = "MISSING_REQUIREMENTS"
