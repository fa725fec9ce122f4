"""Search service - ranked retrieval against the live model."""

import logging
from typing import Optional

from ..analysis.normalizer import normalize
from ..analysis.similarity import search
from ..errors import EmptyModelError
from ..models.document import SearchResponse
from ..strategies.scoring import ScoringStrategy
from .model_store import ModelStore

logger = logging.getLogger(__name__)


class SearchService:
    """Search service with optional filtering strategies."""

    def __init__(
        self,
        store: ModelStore,
        top_k: int = 0,
        strategies: list[ScoringStrategy] | None = None,
    ):
        """Initialize search service.

        Args:
            store: Holder of the live model.
            top_k: Default number of results to return, 0 for all.
            strategies: Filters applied after ranking, in order.
        """
        self._store = store
        self._top_k = top_k
        self._strategies = strategies or []

    def search(self, query: str, top_k: Optional[int] = None) -> SearchResponse:
        """Search the current model.

        Args:
            query: Search query.
            top_k: Override number of results, 0 for all.

        Returns:
            Search response with ranked results.

        Raises:
            ValueError: If the query is blank.
            EmptyModelError: If no documents have been indexed.
        """
        if not query or not query.strip():
            raise ValueError("Please enter a search query.")

        model = self._store.get()
        if model is None:
            raise EmptyModelError()

        results = search(query, model)
        total = len(results)

        for strategy in self._strategies:
            results = strategy.apply(query, results)

        top_k = self._top_k if top_k is None else top_k
        if top_k > 0:
            results = results[:top_k]

        logger.info(
            f"Search: returned {len(results)}/{total} docs for '{query[:50]}'"
        )

        query_terms = results[0].query_terms if results else normalize(query)
        return SearchResponse(
            results=results, query_terms=query_terms, total_matches=total
        )
