"""Cosine similarity ranking over a built model."""
from typing import Mapping

from ..errors import EmptyModelError
from ..models.document import Document, SearchResult
from ..models.index import VectorSpaceModel
from .normalizer import normalize
from .statistics import term_frequency
from .vectors import magnitude, tfidf


def cosine_similarity(
    vector_a: Mapping[str, float],
    magnitude_a: float,
    vector_b: Mapping[str, float],
    magnitude_b: float,
) -> float:
    """Cosine of the angle between two sparse vectors.

    Returns 0.0 if either magnitude is zero. Terms missing from ``vector_b``
    are skipped.
    """
    if magnitude_a == 0 or magnitude_b == 0:
        return 0.0

    dot_product = 0.0
    for term, weight in vector_a.items():
        other = vector_b.get(term)
        if other:
            dot_product += weight * other

    return dot_product / (magnitude_a * magnitude_b)


def search(query: str, model: VectorSpaceModel) -> list[SearchResult]:
    """Rank every indexed document against a free-text query.

    Args:
        query: Raw query text.
        model: Published model to search.

    Returns:
        Results with similarity > 0, best first. Equal scores keep
        document insertion order.

    Raises:
        EmptyModelError: If the model holds no documents.
    """
    if model is None or model.is_empty:
        raise EmptyModelError()

    query_tokens = normalize(query)
    query_vector = tfidf(term_frequency(query_tokens), model.idf)
    query_magnitude = magnitude(query_vector)

    results = []
    for doc_id, entry in model.documents.items():
        similarity = cosine_similarity(
            query_vector, query_magnitude, entry.vector, entry.magnitude
        )
        if not similarity > 0:
            continue

        results.append(
            SearchResult(
                doc_id=doc_id,
                document=Document(
                    id=doc_id, name=entry.name, content=entry.content, type=entry.type
                ),
                similarity=similarity,
                query_terms=list(query_tokens),
                matching_terms=[t for t in query_tokens if entry.tf.get(t, 0) > 0],
            )
        )

    results.sort(key=lambda r: r.similarity, reverse=True)
    return results
