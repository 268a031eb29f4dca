"""Engine error types."""

from typing import Optional


class ConfigurationError(ValueError):
    """Raised when a simulation configuration cannot be run."""

    def __init__(self, field: str, message: str, wire_field: Optional[str] = None):
        super().__init__(message)
        self.field = field
        self.wire_field = wire_field or field
        self.message = message

    def to_dict(self) -> dict:
        return {"field": self.wire_field, "message": self.message}
