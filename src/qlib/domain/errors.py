"""Domain-level exceptions."""


class DecodeError(ValueError):
    """Raised when a wire value cannot be decoded into a domain value."""

    code = "INVALID_REQUEST_TYPE"
