"""Tests for the command-line front end."""
from __future__ import annotations

from pathlib import Path

import pytest

from vsm_search.config.settings import Settings, settings
from vsm_search.presentation import cli


@pytest.fixture()
def cli_settings(monkeypatch: pytest.MonkeyPatch, docs_dir: Path, tmp_path: Path) -> Path:
    """Point the global settings at temporary folders."""
    index_path = tmp_path / "data" / "model.json"
    monkeypatch.setattr(settings, "docs_path", str(docs_dir))
    monkeypatch.setattr(settings, "index_path", str(index_path))
    monkeypatch.setattr(settings, "search_top_k", 10)
    monkeypatch.setattr(settings, "search_score_ratio", 0.0)
    return index_path


class TestSettings:

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VSM_SEARCH_TOP_K", "3")
        monkeypatch.setenv("VSM_INDEX_PATH", "/tmp/index.json")
        loaded = Settings()
        assert loaded.search_top_k == 3
        assert loaded.index_path == "/tmp/index.json"


class TestCli:

    def test_usage_without_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main([]) == 1
        assert "Usage" in capsys.readouterr().out

    def test_unknown_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["frobnicate"]) == 1
        assert "Unknown command: frobnicate" in capsys.readouterr().out

    def test_search_requires_query(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["search"]) == 1
        assert "Please enter a search query." in capsys.readouterr().out

    def test_ingest_then_search(self, cli_settings: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["ingest"]) == 0
        assert cli_settings.exists()

        assert cli.main(["search", "cat", "mouse"]) == 0
        out = capsys.readouterr().out
        assert "1. animals.txt" in out
        assert "Matching terms: cat, mouse" in out
        assert "notes.md" not in out

    def test_search_without_index(self, cli_settings: Path) -> None:
        assert cli.main(["search", "cat"]) == 1

    def test_search_no_matches(self, cli_settings: Path, capsys: pytest.CaptureFixture[str]) -> None:
        cli.main(["ingest"])
        assert cli.main(["search", "zebra"]) == 0
        assert "No matching documents found." in capsys.readouterr().out

    def test_stats_and_clear(self, cli_settings: Path, capsys: pytest.CaptureFixture[str]) -> None:
        cli.main(["ingest"])
        assert cli.main(["stats"]) == 0
        out = capsys.readouterr().out
        assert "Documents: 3" in out
        assert "Top terms by IDF:" in out

        assert cli.main(["clear"]) == 0
        assert not cli_settings.exists()
        assert cli.main(["stats"]) == 1


class TestExcerpt:

    def test_short_text_unchanged(self) -> None:
        assert cli.excerpt("a  short\ntext", 50) == "a short text"

    def test_long_text_cut(self) -> None:
        assert cli.excerpt("abcdefghij", 4) == "abcd..."
