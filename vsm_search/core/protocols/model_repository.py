"""Model repository protocol for dependency injection."""
from typing import Optional, Protocol, runtime_checkable

from ..models.index import VectorSpaceModel


@runtime_checkable
class ModelRepositoryProtocol(Protocol):
    """Protocol for the single persisted model slot."""

    def save(self, model: VectorSpaceModel) -> None:
        """Overwrite the stored model.

        Args:
            model: Model to persist.
        """
        ...

    def load(self) -> Optional[VectorSpaceModel]:
        """Load the stored model.

        Returns:
            The model, or None if nothing usable is stored.
        """
        ...

    def clear(self) -> None:
        """Remove the stored model, if any."""
        ...
