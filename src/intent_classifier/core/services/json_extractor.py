from __future__ import annotations

from ..domain.exceptions import NoJsonFoundError


JSON_FENCE_OPEN = "```json"
FENCE_CLOSE = "```"


class MarkdownJsonExtractor:
    """Domain service for locating the JSON span in an LLM response.

    Looks for a ```json fenced block first, then accepts the whole response
    if it is a bare JSON object. It only locates the span; validating its
    contents is the decoder's job.
    """

    def extract(self, raw: str) -> str:
        """Extract the JSON substring from a model response.

        Args:
            raw: Raw text returned by the model

        Returns:
            Trimmed JSON substring (may be empty for an empty fenced block)

        Raises:
            NoJsonFoundError: If neither a fenced block nor a bare object is found
        """
        fenced = self._extract_fenced(raw)
        if fenced is not None:
            return fenced

        # Bare object fallback for models that omit the fence
        trimmed = raw.strip()
        if trimmed.startswith("{") and trimmed.endswith("}"):
            return trimmed

        raise NoJsonFoundError(raw)

    @staticmethod
    def _extract_fenced(raw: str) -> str | None:
        start = raw.find(JSON_FENCE_OPEN)
        if start == -1:
            return None

        body_start = start + len(JSON_FENCE_OPEN)
        end = raw.find(FENCE_CLOSE, body_start)
        if end == -1:
            # Unclosed fence; no search for a later opener
            return None

        return raw[body_start:end].strip()
