from .app.main import classify, display
from .core.domain.exceptions import (
    ClassifierError,
    DecodeError,
    DecodeShapeError,
    DecodeSyntaxError,
    ExtractionError,
    InvalidResponseError,
    NoJsonFoundError,
    PipelineError,
)
from .core.domain.models import ClassificationResult, Intent, Params, RawResponse

__all__ = [
    "classify",
    "display",
    "ClassificationResult",
    "Intent",
    "Params",
    "RawResponse",
    "ClassifierError",
    "ExtractionError",
    "NoJsonFoundError",
    "DecodeError",
    "DecodeSyntaxError",
    "DecodeShapeError",
    "PipelineError",
    "InvalidResponseError",
]

# stdlib logging defaults: attach NullHandler to prevent 'No handler' warnings
import logging
_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
