import logging
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from .config.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Container:
    """Registry of factories keyed by the type they provide.

    Every service here wraps process-wide state (the live model, the
    persisted slot), so registrations are shared instances unless marked
    ``shared=False``.
    """

    _factories: dict[type, Callable[[], Any]] = field(default_factory=dict)
    _instances: dict[type, Any] = field(default_factory=dict)
    _per_call: set[type] = field(default_factory=set)

    def register(
        self, interface: type[T], factory: Callable[[], T], shared: bool = True
    ) -> None:
        """Register factory for interface.

        Args:
            interface: Type resolved by callers.
            factory: Zero-argument callable building the instance.
            shared: Cache the first instance for later resolves.
        """
        self._factories[interface] = factory
        self._instances.pop(interface, None)
        if shared:
            self._per_call.discard(interface)
        else:
            self._per_call.add(interface)

    def resolve(self, interface: type[T]) -> T:
        try:
            factory = self._factories[interface]
        except KeyError:
            raise KeyError(f"No factory registered for {interface}") from None

        if interface in self._per_call:
            return factory()
        if interface not in self._instances:
            self._instances[interface] = factory()
        return self._instances[interface]

    def __contains__(self, interface: type) -> bool:
        return interface in self._factories

    def reset(self) -> None:
        """Drop cached instances; factories stay registered."""
        self._instances.clear()



container = Container()


def configure_container(settings: Settings) -> Container:
    """Configure container with all dependencies.

    Args:
        settings: Application settings.

    Returns:
        Configured container.
    """
    from .core.protocols.model_repository import ModelRepositoryProtocol
    from .core.protocols.text_extractor import TextExtractorProtocol
    from .core.services.index_service import IndexService
    from .core.services.ingest_service import IngestService
    from .core.services.model_store import ModelStore
    from .core.services.search_service import SearchService
    from .core.strategies.scoring import ScoreCutoffStrategy
    from .infrastructure.document_loaders import CompositeLoader
    from .infrastructure.repositories import JsonFileModelRepository

    container.reset()

    container.register(ModelStore, ModelStore)

    container.register(
        ModelRepositoryProtocol,
        lambda: JsonFileModelRepository(settings.index_path),
    )

    container.register(TextExtractorProtocol, CompositeLoader)

    container.register(
        IndexService,
        lambda: IndexService(
            store=container.resolve(ModelStore),
            repository=container.resolve(ModelRepositoryProtocol),
        ),
    )

    strategies = []
    if settings.search_score_ratio > 0:
        strategies.append(ScoreCutoffStrategy(settings.search_score_ratio))

    container.register(
        SearchService,
        lambda: SearchService(
            store=container.resolve(ModelStore),
            top_k=settings.search_top_k,
            strategies=strategies,
        ),
    )

    container.register(
        IngestService,
        lambda: IngestService(
            index_service=container.resolve(IndexService),
            docs_path=settings.docs_path,
            loader=container.resolve(TextExtractorProtocol),
        ),
    )

    logger.info("Container configured")
    return container
