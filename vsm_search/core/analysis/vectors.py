"""TF-IDF vector construction."""
import math
from typing import Mapping


def tfidf(tf: Mapping[str, int], idf: Mapping[str, float]) -> dict[str, float]:
    """Weight each term by TF * IDF.

    Terms missing from ``idf`` are dropped rather than given a zero weight.
    """
    return {term: count * idf[term] for term, count in tf.items() if term in idf}


def magnitude(vector: Mapping[str, float]) -> float:
    """Euclidean norm; 0.0 for an empty vector."""
    return math.sqrt(sum(weight * weight for weight in vector.values()))
