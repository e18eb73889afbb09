from __future__ import annotations

from dependency_injector import containers, providers

from ..core.services import ClassificationDecoder, MarkdownJsonExtractor, ResultAccessor
from ..core.usecases.classify import ClassifyUseCase
from ..infra.logging import ClassifierLogger


class Container(containers.DeclarativeContainer):
    """DI container; configuration is loaded from an AppConfig via from_pydantic()."""

    config = providers.Configuration()

    # Logger (Resource: manages lifecycle with init/shutdown)
    logger = providers.Resource(
        ClassifierLogger,
        logs_dir=config.directories.logs_dir,
        logger_name=config.logging.logger_name,
        level=config.logging.level,
        console_output=config.logging.console_output,
        file_output=config.logging.file_output,
    )

    # Domain services are stateless
    extractor = providers.Singleton(MarkdownJsonExtractor)

    decoder = providers.Singleton(ClassificationDecoder)

    accessor = providers.Singleton(
        ResultAccessor,
        extractor=extractor,
        decoder=decoder,
    )

    # Use cases
    classify_uc = providers.Factory(
        ClassifyUseCase,
        accessor=accessor,
        logger=logger,
    )
