"""Exception hierarchy of the cornering model."""


class CornerSimError(Exception):
    """Base exception for cornering model errors."""


class ConfigurationError(CornerSimError):
    """Raised when vehicle parameters or drive settings are invalid."""
