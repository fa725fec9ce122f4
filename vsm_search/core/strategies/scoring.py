
import logging
from abc import ABC, abstractmethod

from ..models.document import SearchResult

logger = logging.getLogger(__name__)


class ScoringStrategy(ABC):
    """Base class for post-ranking filters."""

    @abstractmethod
    def apply(self, query: str, results: list[SearchResult]) -> list[SearchResult]:
        """Apply strategy to results."""
        ...


class ScoreCutoffStrategy(ScoringStrategy):
    """Filter results with score much lower than top-1."""

    def __init__(self, score_ratio: float = 0.3):
        """Initialize strategy.

        Args:
            score_ratio: Minimum ratio of score to max_score.
        """
        self._score_ratio = score_ratio

    def apply(self, query: str, results: list[SearchResult]) -> list[SearchResult]:
        """Filter results below threshold."""
        if not results:
            return results

        max_score = results[0].similarity
        min_score = max_score * self._score_ratio

        filtered = [r for r in results if r.similarity >= min_score]

        if len(filtered) < len(results):
            logger.info(
                f"Score cutoff: {len(results)} → {len(filtered)} "
                f"(max={max_score:.4f}, min_allowed={min_score:.4f})"
            )

        return filtered

