"""
Tests for the session registry and concurrent use of one session.

Run with: python -m pytest assistant/tests/test_session_registry.py -v
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from albait.config import AssistantConfig
from core.exceptions import NotFoundError
from assistant.services.session_registry import (
    SessionRegistry,
    get_session_registry,
    reset_session_registry,
)


@pytest.fixture
def registry(catalog):
    return SessionRegistry(catalog=catalog, settings=AssistantConfig(catalog_path=None, max_sessions=2))


class TestSessionRegistry:

    def test_new_session_gets_an_id(self, registry):
        session_id, engine = registry.get_or_create()
        assert session_id
        assert registry.get_or_create(session_id) == (session_id, engine)

    def test_engines_share_the_index(self, registry):
        _, first = registry.get_or_create("a")
        _, second = registry.get_or_create("b")
        assert first is not second
        assert first.index is second.index is registry.index

    def test_least_recently_used_session_evicted(self, registry):
        _, engine_a = registry.get_or_create("a")
        registry.get_or_create("b")
        registry.get_or_create("a")
        registry.get_or_create("c")

        assert len(registry) == 2
        assert registry.get_or_create("a")[1] is engine_a
        with pytest.raises(NotFoundError):
            registry.drop("b")

    def test_drop_unknown_session(self, registry):
        with pytest.raises(NotFoundError) as exc_info:
            registry.drop("missing")
        assert exc_info.value.details["resource"] == "session"

    def test_concurrent_messages_in_one_session(self, registry):
        session_id, engine = registry.get_or_create()
        queries = ["paket vip", "harga paket", "alamat kantor", "manasik"] * 10

        def send(query):
            return registry.get_or_create(session_id)[1].search(query)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(send, queries))

        assert engine.session.query_count == len(queries)
        assert engine.session.package_query_count == 20
        assert sorted(r.query_count for r in results) == list(range(1, len(queries) + 1))
        assert len(engine.session.token_history) == len(queries)


class TestProcessRegistry:

    def test_built_once_under_concurrent_access(self):
        reset_session_registry()
        try:
            with ThreadPoolExecutor(max_workers=8) as pool:
                registries = list(pool.map(lambda _: get_session_registry(), range(16)))
            assert all(r is registries[0] for r in registries)
        finally:
            reset_session_registry()

    def test_reset_builds_a_new_registry(self):
        first = get_session_registry()
        reset_session_registry()
        assert get_session_registry() is not first
