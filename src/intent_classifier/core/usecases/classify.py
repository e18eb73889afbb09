from __future__ import annotations

from ..domain.exceptions import PipelineError
from ..domain.models import ClassificationResult, RawResponse
from ..ports import LoggerPort
from ..services import ResultAccessor


class ClassifyUseCase:
    """Use case for turning a model response into a classification.

    Thin layer over ResultAccessor that records each outcome in the log.
    """

    def __init__(
        self,
        *,
        accessor: ResultAccessor,
        logger: LoggerPort,
    ) -> None:
        self._accessor = accessor
        self._logger = logger

    def execute(self, *, response: RawResponse) -> ClassificationResult:
        """Parse the response into a typed result.

        Args:
            response: Model response to classify

        Returns:
            Decoded classification result

        Raises:
            PipelineError: If extraction or decoding fails
        """
        self._log_received(response)
        try:
            result = self._accessor.parsed_content(response)
        except PipelineError as e:
            self._logger.warning(
                "classification_failed",
                type="classification_failed",
                stage=e.stage,
                error=str(e.error),
                error_type=type(e.error).__name__,
            )
            raise

        self._logger.info(
            "classification_parsed",
            type="classification_parsed",
            intent=result.intent.value,
            has_recipient=result.params.recipient is not None,
            has_message=result.params.message is not None,
        )
        return result

    def display(self, *, response: RawResponse) -> str:
        """Return the best available text for the response.

        Runs the pipeline once; on failure the raw text is returned unchanged.
        """
        self._log_received(response)
        try:
            result = self._accessor.parsed_content(response)
        except PipelineError as e:
            self._logger.info(
                "display_fallback",
                type="display_fallback",
                stage=e.stage,
                error_type=type(e.error).__name__,
            )
            return response.raw_content

        text = self._accessor.render(response, result)
        self._logger.info(
            "display_rendered",
            type="display_rendered",
            intent=result.intent.value,
            text_len=len(text),
        )
        return text

    def _log_received(self, response: RawResponse) -> None:
        self._logger.debug(
            "response_received",
            type="response_received",
            role=response.role,
            raw_len=len(response.raw_content),
        )
