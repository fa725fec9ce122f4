"""Tests for the dependency container and its wiring."""
from __future__ import annotations

from pathlib import Path

import pytest

from vsm_search.config.settings import Settings
from vsm_search.container import Container, configure_container
from vsm_search.core.services import IndexService, IngestService, ModelStore, SearchService


class TestContainer:

    def test_shared_by_default(self) -> None:
        c = Container()
        c.register(list, list)
        assert c.resolve(list) is c.resolve(list)

    def test_per_call_instances(self) -> None:
        c = Container()
        c.register(list, list, shared=False)
        assert c.resolve(list) is not c.resolve(list)

    def test_unknown_interface(self) -> None:
        with pytest.raises(KeyError):
            Container().resolve(dict)

    def test_reregister_drops_cached_instance(self) -> None:
        c = Container()
        c.register(list, lambda: [1])
        first = c.resolve(list)
        c.register(list, lambda: [2])
        assert c.resolve(list) == [2]
        assert first == [1]

    def test_contains_and_reset(self) -> None:
        c = Container()
        c.register(list, list)
        first = c.resolve(list)
        c.reset()
        assert list in c
        assert dict not in c
        assert c.resolve(list) is not first


class TestConfigureContainer:

    def test_services_share_one_store(self, tmp_path: Path) -> None:
        settings = Settings(docs_path=str(tmp_path), index_path=str(tmp_path / "m.json"))
        c = configure_container(settings)
        store = c.resolve(ModelStore)
        assert c.resolve(IndexService)._store is store
        assert c.resolve(SearchService)._store is store
        assert c.resolve(IngestService)._index_service is c.resolve(IndexService)
