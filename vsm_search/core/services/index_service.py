"""Index service - model building and lifecycle."""

import logging
import threading
from typing import Mapping, Optional

from ..analysis.indexer import build_model
from ..models.document import Document
from ..models.index import VectorSpaceModel
from ..protocols.model_repository import ModelRepositoryProtocol
from .model_store import ModelStore

logger = logging.getLogger(__name__)


class IndexService:
    """Service for building, publishing and persisting the model."""

    def __init__(
        self,
        store: ModelStore,
        repository: Optional[ModelRepositoryProtocol] = None,
    ):
        """Initialize index service.

        Args:
            store: Holder of the live model.
            repository: Persistence slot. None disables persistence.
        """
        self._store = store
        self._repository = repository
        self._build_lock = threading.Lock()

    def build(self, documents: Mapping[str, Document]) -> VectorSpaceModel:
        """Rebuild the model from the full corpus and publish it.

        Only one build runs at a time. The previous model stays searchable
        until the new one is complete.

        Args:
            documents: Corpus keyed by document id.

        Returns:
            The newly published model.

        Raises:
            EmptyCorpusError: If ``documents`` is empty.
        """
        with self._build_lock:
            model = build_model(documents)
            logger.info(
                f"Model built: {len(model)} documents, {len(model.terms)} terms"
            )
            self._store.replace(model)
            self._persist(model)

        return model

    def restore(self) -> Optional[VectorSpaceModel]:
        """Load the persisted model into the store, if there is one.

        Returns:
            The restored model, or None.
        """
        if self._repository is None:
            return None

        model = self._repository.load()
        if model is None:
            logger.info("No persisted model to restore")
            return None

        self._store.replace(model)
        logger.info(f"Restored model with {len(model)} documents")
        return model

    def clear(self) -> None:
        """Drop the live model and the persisted copy."""
        with self._build_lock:
            self._store.replace(None)
            if self._repository is not None:
                self._repository.clear()

    def _persist(self, model: VectorSpaceModel) -> None:
        if self._repository is None:
            return
        try:
            self._repository.save(model)
        except OSError as e:
            logger.warning(f"Failed to persist model: {e}")
