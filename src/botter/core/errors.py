"""Core interaction errors."""


class BotterError(Exception):
    """Base class for all Botter errors."""

    pass


class ConfigError(BotterError):
    """Raised when configuration is invalid."""


class ValidationError(BotterError):
    """Raised when user input fails validation."""

    pass


class DeliveryError(BotterError):
    """Raised by a message sink when an outbound message cannot be delivered."""

    pass
