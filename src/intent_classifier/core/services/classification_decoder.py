from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..domain.exceptions import DecodeShapeError, DecodeSyntaxError
from ..domain.models import ClassificationResult, Params


ModelT = TypeVar("ModelT", bound=BaseModel)


class ClassificationDecoder:
    """Domain service for decoding and encoding classification results.

    Decoding is two-step: ``json.loads`` for syntax, then pydantic validation
    for shape. Encoding produces the canonical single-line JSON form with
    every parameter field present (``null`` when absent).
    """

    def decode(self, json_text: str) -> ClassificationResult:
        """Decode a JSON object into a ClassificationResult.

        Args:
            json_text: JSON object text with ``intent`` and ``params`` fields

        Returns:
            Decoded classification result

        Raises:
            DecodeSyntaxError: If the text is not well-formed JSON
            DecodeShapeError: If required fields are missing or invalid
        """
        return self._decode(json_text, ClassificationResult)

    def decode_params(self, json_text: str) -> Params:
        """Decode a JSON object directly into Params.

        Missing keys and unknown keys are both accepted.
        """
        return self._decode(json_text, Params)

    def encode(self, result: ClassificationResult) -> str:
        """Return the canonical JSON text for a classification result."""
        return result.model_dump_json()

    def encode_params(self, params: Params) -> str:
        return params.model_dump_json()

    def _decode(self, json_text: str, model: type[ModelT]) -> ModelT:
        try:
            data = json.loads(json_text)
        except json.JSONDecodeError as e:
            raise DecodeSyntaxError(json_text, f"Malformed JSON: {e}") from e
        except RecursionError as e:
            raise DecodeSyntaxError(json_text, "Malformed JSON: nesting too deep") from e

        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise DecodeShapeError(json_text, _describe_shape_error(e)) from e


def _describe_shape_error(exc: ValidationError) -> str:
    """Summarize the first validation error, naming the offending value."""
    err = exc.errors()[0]
    field = ".".join(str(part) for part in err["loc"]) or "<root>"
    if err["type"] == "missing":
        return f"Missing required field '{field}'"
    offending: Any = err.get("input")
    return f"Invalid value for '{field}': {offending!r} ({err['msg']})"
