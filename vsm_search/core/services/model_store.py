"""Holder for the single live model."""

import logging
import threading
from typing import Optional

from ..models.index import VectorSpaceModel

logger = logging.getLogger(__name__)


class ModelStore:
    """Current-model reference with atomic replacement.

    Readers call ``get`` without locking and always see a complete model;
    writers publish a fully built model through ``replace``.
    """

    def __init__(self, model: Optional[VectorSpaceModel] = None):
        self._model = model
        self._lock = threading.Lock()

    def get(self) -> Optional[VectorSpaceModel]:
        return self._model

    def replace(self, model: Optional[VectorSpaceModel]) -> Optional[VectorSpaceModel]:
        """Publish a new model.

        Args:
            model: Model to publish, or None to clear.

        Returns:
            The previously published model.
        """
        with self._lock:
            previous, self._model = self._model, model

        if model is None:
            logger.info("Model cleared")
        else:
            logger.info(f"Model published: {len(model)} documents")
        return previous

    @property
    def has_model(self) -> bool:
        model = self._model
        return model is not None and not model.is_empty
