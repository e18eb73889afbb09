from __future__ import annotations

from .json_extractor import MarkdownJsonExtractor
from .classification_decoder import ClassificationDecoder
from .result_accessor import ResultAccessor

__all__ = [
    "MarkdownJsonExtractor",
    "ClassificationDecoder",
    "ResultAccessor",
]
