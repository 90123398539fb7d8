"""Error types for phase resolution and page configuration."""


class SellaporterError(Exception):
    """Base exception for Sellaporter errors."""

    pass


class InvalidConfigurationError(SellaporterError):
    """Raised when launch configuration cannot be turned into an instant.

    Attributes:
        field: Name of the configuration leg that failed (e.g. "start")
        raw_value: The raw value as supplied by the author
    """

    def __init__(self, message: str, field: str | None = None, raw_value: object = None) -> None:
        self.field = field
        self.raw_value = raw_value
        super().__init__(message)

