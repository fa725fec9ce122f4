"""Scoring and filtering strategies."""
from .scoring import ScoreCutoffStrategy, ScoringStrategy

__all__ = [
    "ScoringStrategy",
    "ScoreCutoffStrategy",
]
