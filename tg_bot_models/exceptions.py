"""
Custom exceptions for tg-bot-models.

Construction-time violations raise InvalidPayloadError, decoding a wire
document raises PayloadDecodeError, and projection failures raise
SerializationError.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError


class TgBotModelsError(Exception):
    """Base exception for tg-bot-models errors."""

    pass


class InvalidPayloadError(TgBotModelsError):
    """
    Raised when a model is constructed with invalid field values.

    The exception never wraps a partially-built object: a failed
    construction yields no instance at all.
    """

    def __init__(self, model: str, errors: list[str]):
        """
        Initialize invalid payload error.

        Args:
            model: Name of the model class that rejected its input
            errors: Human-readable descriptions of each violated constraint
        """
        self.model = model
        self.errors = errors
        super().__init__("; ".join(errors) or f"Invalid {model}")

    @classmethod
    def from_validation_error(cls, model: str, exc: PydanticValidationError) -> "InvalidPayloadError":
        """
        Build an error from a Pydantic validation error.

        Messages raised by our own validators are kept verbatim; errors
        produced by Pydantic itself are prefixed with the field location.

        Args:
            model: Name of the model class
            exc: The Pydantic validation error

        Returns:
            Exception instance of the calling class
        """
        return cls(model, [_describe(error) for error in exc.errors()])


class PayloadDecodeError(InvalidPayloadError):
    """Raised when an incoming wire document cannot be decoded."""

    pass


class SerializationError(TgBotModelsError):
    """Raised when a model cannot be projected to its wire form."""

    pass


def _describe(error: Any) -> str:
    cause = error.get("ctx", {}).get("error")
    if error["type"] == "value_error" and isinstance(cause, Exception):
        return str(cause)

    location = ".".join(str(part) for part in error["loc"])
    if location:
        return f"{location}: {error['msg']}"
    return error["msg"]
