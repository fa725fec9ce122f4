"""Corpus indexing: turns documents into a VectorSpaceModel."""
from typing import Mapping

from ..errors import EmptyCorpusError
from ..models.document import Document
from ..models.index import DocumentEntry, VectorSpaceModel
from .normalizer import normalize
from .statistics import inverse_document_frequency, term_frequency
from .vectors import magnitude, tfidf


def build_model(documents: Mapping[str, Document]) -> VectorSpaceModel:
    """Build a complete model from scratch.

    Args:
        documents: Corpus keyed by document id, in insertion order.

    Returns:
        A new model. Nothing is shared with any previously built model.

    Raises:
        EmptyCorpusError: If ``documents`` is empty.
    """
    if not documents:
        raise EmptyCorpusError()

    frequencies: dict[str, dict[str, int]] = {}
    for doc_id, doc in documents.items():
        frequencies[doc_id] = term_frequency(normalize(doc.content))

    idf = inverse_document_frequency(frequencies, len(documents))

    entries = {}
    for doc_id, doc in documents.items():
        tf = frequencies[doc_id]
        weights = tfidf(tf, idf)
        entries[doc_id] = DocumentEntry(
            name=doc.name,
            content=doc.content,
            type=doc.type,
            tf=tf,
            tfidf=weights,
            vector=dict(weights),
            magnitude=magnitude(weights),
        )

    return VectorSpaceModel(documents=entries, idf=idf, terms=list(idf))
