"""Term frequency and inverse document frequency."""
import math
from collections import Counter
from typing import Collection, Iterable, Mapping


def term_frequency(tokens: Iterable[str]) -> dict[str, int]:
    """Count occurrences of each token."""
    return dict(Counter(tokens))


def inverse_document_frequency(
    document_terms: Mapping[str, Collection[str]], total_docs: int
) -> dict[str, float]:
    """Compute ln(N / df) for every term seen in the corpus.

    Args:
        document_terms: Distinct terms of each document, keyed by document id.
        total_docs: Number of documents in the corpus, at least 1.

    Returns:
        IDF keyed by term in first-seen order. A term present in every
        document gets 0.0.
    """
    doc_freq: Counter[str] = Counter()
    for terms in document_terms.values():
        doc_freq.update(list(dict.fromkeys(terms)))

    return {term: math.log(total_docs / df) for term, df in doc_freq.items()}
