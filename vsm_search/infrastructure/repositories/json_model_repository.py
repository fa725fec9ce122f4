import logging
from pathlib import Path
from typing import Optional

from vsm_search.core.models.index import VectorSpaceModel
from vsm_search.core.serialization import load_model, serialize_model

logger = logging.getLogger(__name__)


class JsonFileModelRepository:
    """Model persisted as one JSON file."""

    def __init__(self, path: str | Path):
        """Initialize repository.

        Args:
            path: File holding the serialized model.
        """
        self._path = Path(path)

    def save(self, model: VectorSpaceModel) -> None:
        """Write the model, replacing the previous file atomically."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        try:
            tmp.write_text(serialize_model(model), encoding="utf-8")
            tmp.replace(self._path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise

        logger.info(f"Model saved to {self._path}")

    def load(self) -> Optional[VectorSpaceModel]:
        """Read the model; missing or corrupt files give None."""
        if not self._path.exists():
            return None

        try:
            data = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Cannot read persisted model {self._path}: {e}")
            return None

        return load_model(data)

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)
