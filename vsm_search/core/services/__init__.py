"""Core business services."""
from .model_store import ModelStore
from .index_service import IndexService
from .search_service import SearchService
from .ingest_service import IngestService

__all__ = [
    "ModelStore",
    "IndexService",
    "SearchService",
    "IngestService",
]
