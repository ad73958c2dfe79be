"""Error types shared across services and adapters."""


class CalorieCoachError(Exception):
    """Base error for the application."""


class TransportError(CalorieCoachError):
    """Raised when an external provider call fails."""


class ParseError(CalorieCoachError):
    """Raised when a model response cannot be read as a JSON object."""
