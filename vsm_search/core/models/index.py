"""Index domain models."""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class DocumentEntry:
    """A document as stored in the model, with its term statistics."""
    name: str
    content: str
    type: str
    tf: dict[str, int] = field(default_factory=dict)
    tfidf: dict[str, float] = field(default_factory=dict)
    vector: dict[str, float] = field(default_factory=dict)
    magnitude: float = 0.0


@dataclass(frozen=True)
class VectorSpaceModel:
    """Corpus-level index: every document vector plus the shared IDF table.

    Instances are built once by ``build_model`` and never modified after
    they are published.
    """
    documents: dict[str, DocumentEntry] = field(default_factory=dict)
    idf: dict[str, float] = field(default_factory=dict)
    terms: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.documents)

    @property
    def is_empty(self) -> bool:
        return not self.documents

    def top_terms(self, n: int = 30) -> list[tuple[str, float]]:
        """Terms ordered by descending IDF, ties broken alphabetically."""
        ranked = sorted(self.idf.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:n]
