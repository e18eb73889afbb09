"""Domain exceptions for intent_classifier."""

from __future__ import annotations

from typing import Literal


class ClassifierError(Exception):
    """Base class for every failure raised by the classification pipeline."""


class ExtractionError(ClassifierError):
    """Raised when no JSON span can be located in a model response."""


class NoJsonFoundError(ExtractionError):
    """Raised when neither a fenced ```json block nor a bare object is present.

    The original response text is kept on the exception so callers can log it
    or show it to the user.
    """

    def __init__(self, raw_text: str, message: str | None = None) -> None:
        self.raw_text = raw_text
        if message is None:
            message = f"Could not extract JSON from content: {raw_text!r}"
        super().__init__(message)


class DecodeError(ClassifierError):
    """Raised when an extracted JSON span cannot be turned into a typed value."""

    def __init__(self, json_text: str, message: str) -> None:
        self.json_text = json_text
        super().__init__(message)


class DecodeSyntaxError(DecodeError):
    """The extracted span is not well-formed JSON."""


class DecodeShapeError(DecodeError):
    """Well-formed JSON that is missing required fields or has invalid values."""


PipelineStage = Literal["extraction", "decoding"]


class PipelineError(ClassifierError):
    """Wraps the failure of one pipeline stage, keeping track of which one."""

    def __init__(self, stage: PipelineStage, error: ExtractionError | DecodeError) -> None:
        self.stage = stage
        self.error = error
        super().__init__(f"{stage} failed: {error}")


class InvalidResponseError(ClassifierError):
    """Raised when a chat-message envelope cannot be read into a RawResponse."""
