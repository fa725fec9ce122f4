"""Document domain models."""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Document:
    """Plain-text document handed to the index by an extraction collaborator."""
    id: str
    name: str
    content: str
    type: str = "text/plain"


@dataclass
class SearchResult:
    """One ranked match for a query."""
    doc_id: str
    document: Document
    similarity: float
    query_terms: list[str] = field(default_factory=list)
    matching_terms: list[str] = field(default_factory=list)


@dataclass
class SearchResponse:
    """Search response for presentation layer."""
    results: list[SearchResult]
    query_terms: list[str]
    total_matches: int
