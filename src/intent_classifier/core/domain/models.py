from __future__ import annotations

import json
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import InvalidResponseError


class Intent(str, Enum):
    """Classified purpose of a user request.

    Values are the exact wire names; adding a member changes the schema.
    """

    SEND_EMAIL = "SendEmail"
    SCHEDULE_MEETING = "ScheduleMeeting"
    NO_ACTION = "NoAction"

    def __str__(self) -> str:
        return self.value


class Params(BaseModel):
    """Parameters attached to an intent.

    Both fields are optional: ``None`` means "not applicable to this intent".
    A missing key and an explicit ``null`` decode to the same value.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    recipient: str | None = None
    message: str | None = None

    @field_validator("recipient", "message")
    @classmethod
    def _reject_lone_surrogates(cls, value: str | None) -> str | None:
        # JSON escapes like "\ud800" decode to text that cannot be re-encoded
        if value is not None and any("\ud800" <= ch <= "\udfff" for ch in value):
            raise ValueError("contains an unpaired surrogate")
        return value

    @classmethod
    def with_values(cls, recipient: str, message: str) -> "Params":
        """Build parameters with both fields present."""
        return cls(recipient=recipient, message=message)


class ClassificationResult(BaseModel):
    """One intent paired with its parameters."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    intent: Intent
    params: Params


class RawResponse(BaseModel):
    """Unprocessed text returned by the model plus the speaker's role.

    The provider's chat message carries the text under ``content``; it is
    exposed here as ``raw_content``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    role: str
    raw_content: str = Field(alias="content")

    @classmethod
    def from_json(cls, text: str) -> "RawResponse":
        """Read a ``{"role": ..., "content": ...}`` chat message.

        Raises:
            InvalidResponseError: If the text is not JSON or lacks either field
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidResponseError(f"Chat message is not valid JSON: {e}") from e
        except RecursionError as e:
            raise InvalidResponseError("Chat message is nested too deeply") from e

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidResponseError(f"Invalid chat message: {e}") from e
