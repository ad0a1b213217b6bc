"""Shared test fixtures for the esupdater test suite.

Provides a mock Elasticsearch client backed by an in-memory cluster,
and paths to the JSON resource fixtures under tests/resources/.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
import structlog
from elasticsearch import NotFoundError

RESOURCES_DIR = Path(__file__).parent / "resources"


# ---------------------------------------------------------------------------
# Mock Elasticsearch client
# ---------------------------------------------------------------------------

def _response(body: dict) -> MagicMock:
    """Mimic an ObjectApiResponse exposing ``.body``."""
    resp = MagicMock()
    resp.body = body
    resp.__getitem__ = lambda s, k: resp.body[k]
    return resp


def _not_found(message: str) -> NotFoundError:
    return NotFoundError(message, meta=MagicMock(status=404), body={"error": message})


class MockIndicesClient:
    """In-memory stand-in for ``Elasticsearch.indices``.

    Every call is appended to the parent's ``calls`` list as
    ``(method, kwargs)`` so tests can assert on what reached the cluster.
    """

    def __init__(self, parent: "MockElasticsearch", ignore_status: tuple[int, ...] = ()) -> None:
        self._parent = parent
        self._ignore_status = ignore_status

    def _record(self, method: str, **kwargs: Any) -> None:
        self._parent.calls.append((method, kwargs))

    def exists(self, *, index: str, **kwargs: Any) -> bool:
        self._record("exists", index=index)
        return index in self._parent.indices_store

    def create(self, *, index: str, **kwargs: Any) -> MagicMock:
        self._record("create", index=index, **kwargs)
        if self._parent.acknowledge:
            self._parent.indices_store[index] = {
                "settings": kwargs.get("settings"),
                "mappings": kwargs.get("mappings"),
                "aliases": kwargs.get("aliases"),
            }
        return _response({"acknowledged": self._parent.acknowledge, "index": index})

    def put_settings(self, *, index: str, settings: dict, **kwargs: Any) -> MagicMock:
        self._record("put_settings", index=index, settings=settings)
        if index not in self._parent.indices_store:
            raise _not_found(f"no such index [{index}]")
        self._parent.indices_store[index]["updated_settings"] = settings
        return _response({"acknowledged": True})

    def get_template(self, *, name: str, **kwargs: Any) -> MagicMock:
        self._record("get_template", name=name)
        if name in self._parent.templates_store:
            return _response({name: self._parent.templates_store[name]})
        if 404 not in self._ignore_status:
            raise _not_found(f"index_template [{name}] missing")
        return _response({})

    def put_template(self, *, name: str, body: dict, **kwargs: Any) -> MagicMock:
        self._record("put_template", name=name, body=body)
        if self._parent.acknowledge:
            self._parent.templates_store[name] = body
        return _response({"acknowledged": self._parent.acknowledge})

    def delete_template(self, *, name: str, **kwargs: Any) -> MagicMock:
        self._record("delete_template", name=name)
        if name not in self._parent.templates_store:
            raise _not_found(f"index_template [{name}] missing")
        del self._parent.templates_store[name]
        return _response({"acknowledged": True})


class MockElasticsearch:
    """Mock synchronous Elasticsearch client for unit tests.

    Set ``acknowledge = False`` to make create calls come back
    unacknowledged.
    """

    def __init__(self) -> None:
        self.indices_store: dict[str, dict] = {}
        self.templates_store: dict[str, dict] = {}
        self.calls: list[tuple[str, dict]] = []
        self.acknowledge = True
        self.indices = MockIndicesClient(self)

    def options(self, *, ignore_status: int | tuple[int, ...] = (), **kwargs: Any) -> "MockOptionsView":
        if isinstance(ignore_status, int):
            ignore_status = (ignore_status,)
        return MockOptionsView(self, tuple(ignore_status))

    def close(self) -> None:
        pass

    def calls_to(self, method: str) -> list[dict]:
        """Keyword arguments of every recorded call to ``method``."""
        return [kwargs for name, kwargs in self.calls if name == method]

    def mutations(self) -> list[str]:
        """Names of the recorded calls that change cluster state."""
        return [
            name for name, _ in self.calls
            if name in {"create", "put_settings", "put_template", "delete_template"}
        ]


class MockOptionsView:
    """What ``client.options(...)`` returns: same cluster, per-call options."""

    def __init__(self, parent: MockElasticsearch, ignore_status: tuple[int, ...]) -> None:
        self.indices = MockIndicesClient(parent, ignore_status)


@pytest.fixture
def mock_es_client() -> MockElasticsearch:
    """Provide a mock Elasticsearch client."""
    return MockElasticsearch()


# ---------------------------------------------------------------------------
# Resource fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def resources_root() -> Path:
    """Root holding the twitter index and tweet template fixtures."""
    return RESOURCES_DIR / "es"


@pytest.fixture
def custom_root() -> Path:
    """A second root, used to check that ``root`` overrides the default."""
    return RESOURCES_DIR / "custom"


@pytest.fixture
def twitter_settings() -> dict:
    return {"index": {"number_of_shards": 3, "number_of_replicas": 2}}


@pytest.fixture
def tweet_template() -> dict:
    return {
        "index_patterns": ["twitter*"],
        "settings": {"number_of_shards": 1},
        "mappings": {"properties": {"message": {"type": "text"}}},
    }


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _default_logging(monkeypatch):
    """Keep structlog on its uncached defaults.

    A cached console logger would hold on to whatever stdout was active
    when it was first used, which breaks once CliRunner swaps it out.
    """
    monkeypatch.setattr("esupdater.config.settings._configure_logging", lambda level: None)
    yield
    structlog.reset_defaults()
