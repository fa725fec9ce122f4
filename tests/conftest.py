"""Shared fixtures for vsm_search tests."""
from __future__ import annotations

from pathlib import Path

import pytest

from vsm_search.core.analysis import build_model
from vsm_search.core.models import Document, VectorSpaceModel


def make_corpus(**contents: str) -> dict[str, Document]:
    """Build an id -> Document mapping, keeping keyword order."""
    return {
        doc_id: Document(id=doc_id, name=f"{doc_id}.txt", content=text)
        for doc_id, text in contents.items()
    }


@pytest.fixture()
def cat_dog_corpus() -> dict[str, Document]:
    return make_corpus(d1="the cat sat on the mat", d2="the dog sat on the log")


@pytest.fixture()
def cat_dog_model(cat_dog_corpus: dict[str, Document]) -> VectorSpaceModel:
    return build_model(cat_dog_corpus)


@pytest.fixture()
def docs_dir(tmp_path: Path) -> Path:
    """Folder with a few supported files and one unsupported file."""
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "animals.txt").write_text("The cat chased the mouse around the house.", encoding="utf-8")
    (docs / "notes.md").write_text("# Garden\n\nPlanting tomatoes and watering roses.", encoding="utf-8")
    (docs / "prices.csv").write_text("fruit,price\napple,3\nbanana,2\n", encoding="utf-8")
    (docs / "logo.png").write_bytes(b"\x89PNG\r\n")
    return docs
