"""JSON (de)serialization of VectorSpaceModel."""
import json
import logging
import math
from dataclasses import asdict
from typing import Any, Optional

from .errors import DeserializationError
from .models.index import DocumentEntry, VectorSpaceModel

logger = logging.getLogger(__name__)


def serialize_model(model: VectorSpaceModel) -> str:
    """Dump a model to JSON, keeping document order."""
    return json.dumps(asdict(model), ensure_ascii=False)


def _number(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DeserializationError(f"{where}: expected a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise DeserializationError(f"{where}: non-finite value")
    return float(value)


def _weights(raw: Any, where: str) -> dict[str, float]:
    if not isinstance(raw, dict):
        raise DeserializationError(f"{where}: expected an object")
    return {str(term): _number(weight, f"{where}[{term}]") for term, weight in raw.items()}


def _entry(doc_id: str, raw: Any) -> DocumentEntry:
    where = f"documents[{doc_id}]"
    if not isinstance(raw, dict):
        raise DeserializationError(f"{where}: expected an object")

    try:
        name, content, doc_type = raw["name"], raw["content"], raw["type"]
        tf_raw, tfidf_raw, vector_raw = raw["tf"], raw["tfidf"], raw["vector"]
        magnitude = raw["magnitude"]
    except KeyError as e:
        raise DeserializationError(f"{where}: missing field {e}") from e

    if not all(isinstance(v, str) for v in (name, content, doc_type)):
        raise DeserializationError(f"{where}: name, content and type must be strings")

    tf = _weights(tf_raw, f"{where}.tf")
    return DocumentEntry(
        name=name,
        content=content,
        type=doc_type,
        tf={term: int(count) for term, count in tf.items()},
        tfidf=_weights(tfidf_raw, f"{where}.tfidf"),
        vector=_weights(vector_raw, f"{where}.vector"),
        magnitude=_number(magnitude, f"{where}.magnitude"),
    )


def deserialize_model(data: str | bytes) -> VectorSpaceModel:
    """Parse a model produced by :func:`serialize_model`.

    Raises:
        DeserializationError: If the data is not valid JSON or does not
            have the expected structure.
    """
    try:
        raw = json.loads(data)
    except (TypeError, ValueError, RecursionError) as e:
        raise DeserializationError(f"Invalid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise DeserializationError("Top-level value must be an object")

    try:
        documents_raw, idf_raw, terms_raw = raw["documents"], raw["idf"], raw["terms"]
    except KeyError as e:
        raise DeserializationError(f"Missing field {e}") from e

    if not isinstance(documents_raw, dict):
        raise DeserializationError("documents: expected an object")
    if not isinstance(terms_raw, list) or not all(isinstance(t, str) for t in terms_raw):
        raise DeserializationError("terms: expected a list of strings")

    documents = {str(doc_id): _entry(doc_id, entry) for doc_id, entry in documents_raw.items()}
    return VectorSpaceModel(documents=documents, idf=_weights(idf_raw, "idf"), terms=terms_raw)


def load_model(data: Optional[str | bytes]) -> Optional[VectorSpaceModel]:
    """Best-effort restore: absent or corrupt data yields None."""
    if not data:
        return None

    try:
        return deserialize_model(data)
    except DeserializationError as e:
        logger.warning(f"Ignoring persisted model: {e}")
        return None
