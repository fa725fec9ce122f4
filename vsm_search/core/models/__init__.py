"""Domain models."""
from .document import Document, SearchResult, SearchResponse
from .index import DocumentEntry, VectorSpaceModel

__all__ = [
    "Document",
    "SearchResult",
    "SearchResponse",
    "DocumentEntry",
    "VectorSpaceModel",
]
