"""
Base model for Telegram wire objects.

Every model in this package is a frozen Pydantic model that validates on
construction, ignores unknown keys when decoding, and projects itself to
the Bot API's snake_case JSON with absent optional fields omitted.
"""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_core import PydanticSerializationError

from tg_bot_models.core.serialization import dumps
from tg_bot_models.exceptions import InvalidPayloadError, PayloadDecodeError, SerializationError
from tg_bot_models.logging import get_logger

logger = get_logger(__name__)


class _TelegramObjectMeta(type(BaseModel)):
    """
    Converts validation failures of direct construction.

    Only a call such as ``Invoice(...)`` passes through here. Nested
    objects and decoded documents are built by the validator itself, so
    their errors stay with the outermost model being validated.
    """

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        try:
            return super().__call__(*args, **kwargs)
        except ValidationError as e:
            raise InvalidPayloadError.from_validation_error(cls.__name__, e) from e


class TelegramObject(BaseModel, metaclass=_TelegramObjectMeta):
    """Immutable value object with a canonical JSON projection."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """
        Project the object to its wire form.

        Returns:
            Dictionary keyed by wire names, without fields that hold no value

        Raises:
            SerializationError: If a nested value cannot be projected
        """
        try:
            return self.model_dump(mode="json", by_alias=True, exclude_none=True)
        except SerializationError:
            raise
        except (PydanticSerializationError, ValueError, TypeError) as e:
            logger.error("Failed to project model", model=type(self).__name__, error=str(e))
            raise SerializationError(f"Failed to serialize {type(self).__name__}: {e}") from e

    def to_json(self) -> str:
        """Return the wire projection as compact JSON text."""
        return dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        """
        Decode a wire document that has already been parsed from JSON.

        Raises:
            PayloadDecodeError: If the document does not describe a valid object
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise PayloadDecodeError.from_validation_error(cls.__name__, e) from e

    @classmethod
    def from_json(cls, raw: str | bytes) -> Self:
        """
        Decode JSON text.

        Raises:
            PayloadDecodeError: On malformed JSON or an invalid document
        """
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            raise PayloadDecodeError.from_validation_error(cls.__name__, e) from e

    def __str__(self) -> str:
        return self.to_json()
