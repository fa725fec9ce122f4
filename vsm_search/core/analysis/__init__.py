"""Vector space model: normalization, term statistics, vectors and ranking."""
from .indexer import build_model
from .normalizer import normalize, stem, tokenize
from .similarity import cosine_similarity, search
from .statistics import inverse_document_frequency, term_frequency
from .vectors import magnitude, tfidf

__all__ = [
    "build_model",
    "normalize",
    "stem",
    "tokenize",
    "cosine_similarity",
    "search",
    "inverse_document_frequency",
    "term_frequency",
    "magnitude",
    "tfidf",
]
