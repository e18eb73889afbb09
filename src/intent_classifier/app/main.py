from __future__ import annotations

from .config import AppConfig
from .container import Container
from ..core.domain.models import ClassificationResult, RawResponse


def _create_container(config: AppConfig | None = None) -> Container:
    """Create and initialize a container.

    Args:
        config: Optional config. If None, loads from environment variables.

    Returns:
        Initialized container instance
    """
    container = Container()

    if config is None:
        # Load from environment variables (BaseSettings default behavior)
        config = AppConfig()

    container.config.from_pydantic(config)
    container.init_resources()

    return container


def _build_response(container: Container, raw_text: str, role: str | None) -> RawResponse:
    return RawResponse(
        role=role or container.config.response.default_role(),
        content=raw_text,
    )


def classify(
    raw_text: str,
    *,
    role: str | None = None,
    config: AppConfig | None = None,
) -> ClassificationResult:
    """Classify raw model output into an intent and its parameters.

    Args:
        raw_text: Text returned by the model
        role: Speaker role (defaults to the configured default role)
        config: Optional config for testing. If None, loads from env vars.

    Returns:
        Decoded classification result

    Raises:
        PipelineError: If no JSON is found or it cannot be decoded
    """
    container = _create_container(config)
    try:
        uc = container.classify_uc()
        return uc.execute(response=_build_response(container, raw_text, role))
    finally:
        container.shutdown_resources()


def display(
    raw_text: str,
    *,
    role: str | None = None,
    config: AppConfig | None = None,
) -> str:
    """Return canonical JSON for the classification, or the raw text if it fails."""
    container = _create_container(config)
    try:
        uc = container.classify_uc()
        return uc.display(response=_build_response(container, raw_text, role))
    finally:
        container.shutdown_resources()
