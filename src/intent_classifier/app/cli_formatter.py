"""CLI output formatting utilities for human-readable display."""

from __future__ import annotations

from ..core.domain.exceptions import PipelineError
from ..core.domain.models import ClassificationResult


def format_classification_result(result: ClassificationResult) -> str:
    """Format a classification result for human-readable CLI output.

    Args:
        result: Classification result

    Returns:
        Formatted string for display
    """
    lines = []
    lines.append("=" * 60)
    lines.append("CLASSIFICATION RESULT")
    lines.append("=" * 60)

    lines.append(f"\nUser intent:    {result.intent}")
    lines.append(f"User recipient: {_or_na(result.params.recipient)}")
    lines.append(f"Message:        {_or_na(result.params.message)}")

    lines.append("\n" + "=" * 60)

    return "\n".join(lines)


def format_pipeline_error(error: PipelineError) -> str:
    """One-line description of a failed pipeline run for stderr."""
    return f"Error: {error.stage} failed ({type(error.error).__name__}): {error.error}"


def _or_na(value: str | None) -> str:
    return "N/A" if value is None else value
