from __future__ import annotations

from ..domain.exceptions import DecodeError, ExtractionError, PipelineError
from ..domain.models import ClassificationResult, RawResponse
from .classification_decoder import ClassificationDecoder
from .json_extractor import MarkdownJsonExtractor


class ResultAccessor:
    """Runs extraction and decoding over a RawResponse.

    ``parsed_content`` surfaces every failure as a PipelineError;
    ``display_content`` always returns something printable, falling back to
    the raw text.
    """

    def __init__(
        self,
        *,
        extractor: MarkdownJsonExtractor,
        decoder: ClassificationDecoder,
    ) -> None:
        self._extractor = extractor
        self._decoder = decoder

    def parsed_content(self, response: RawResponse) -> ClassificationResult:
        """Extract and decode the classification result.

        Raises:
            PipelineError: With ``stage`` set to "extraction" or "decoding"
        """
        return self._run(response.raw_content)

    def display_content(self, response: RawResponse) -> str:
        """Return the canonical JSON of the result, or the raw text on failure."""
        try:
            result = self._run(response.raw_content)
        except PipelineError:
            return response.raw_content
        return self.render(response, result)

    def render(self, response: RawResponse, result: ClassificationResult) -> str:
        """Encode an already decoded result, falling back to the raw text."""
        try:
            return self._decoder.encode(result)
        except ValueError:
            # pydantic serialization errors subclass ValueError
            return response.raw_content

    def _run(self, raw: str) -> ClassificationResult:
        try:
            json_text = self._extractor.extract(raw)
        except ExtractionError as e:
            raise PipelineError("extraction", e) from e

        try:
            return self._decoder.decode(json_text)
        except DecodeError as e:
            raise PipelineError("decoding", e) from e
