"""
Session Registry

Keeps one SearchEngine per chat session. The catalog and fuzzy index are
built once and shared; each engine only adds its own SessionContext.

Sessions are evicted least-recently-used once the configured limit is hit.
"""

import threading
from collections import OrderedDict
from typing import Optional, Tuple

from albait.config import get_config
from core.exceptions import NotFoundError
from core.services.base import BaseService

from .catalog import load_catalog
from .engine import SearchEngine
from .retriever import RapidFuzzIndexBuilder


class SessionRegistry(BaseService):
    """Thread-safe LRU map of session id -> SearchEngine."""

    def __init__(self, catalog=None, settings=None):
        self.settings = settings or get_config().assistant
        self.catalog = tuple(catalog if catalog is not None else load_catalog(self.settings.catalog_path))
        self.index = RapidFuzzIndexBuilder(threshold=self.settings.fuzzy_threshold).index(self.catalog)
        self.max_sessions = self.settings.max_sessions
        self._engines: "OrderedDict[str, SearchEngine]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._engines)

    def _new_engine(self) -> SearchEngine:
        return SearchEngine(catalog=self.catalog, index=self.index, settings=self.settings)

    def get_or_create(self, session_id: Optional[str] = None) -> Tuple[str, SearchEngine]:
        """
        Resolve the engine of a session.

        Unknown or missing ids start a fresh session; the returned id is the
        one the client must send back on its next message.
        """
        with self._lock:
            if session_id and session_id in self._engines:
                self._engines.move_to_end(session_id)
                return session_id, self._engines[session_id]

            session_id = session_id or self.generate_request_id()
            engine = self._new_engine()
            self._engines[session_id] = engine

            while len(self._engines) > self.max_sessions:
                evicted, _ = self._engines.popitem(last=False)
                self.logger.info(f"Session {evicted} evicted (limit {self.max_sessions})")

            self.logger.debug(f"Session {session_id} started ({len(self._engines)} active)")
            return session_id, engine

    def drop(self, session_id: str) -> None:
        with self._lock:
            if session_id not in self._engines:
                raise NotFoundError("Sesi tidak ditemukan", resource="session")
            del self._engines[session_id]
        self.logger.debug(f"Session {session_id} dropped")


_registry: Optional[SessionRegistry] = None
_registry_lock = threading.Lock()


def get_session_registry() -> SessionRegistry:
    """
    Process-wide registry used by the API views.

    Built once, under a lock, so concurrent first requests share one catalog
    and one index. AssistantConfig.ready() builds it at startup.
    """
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = SessionRegistry()
    return _registry


def reset_session_registry() -> None:
    """Forget the process-wide registry; the next access builds a new one."""
    global _registry
    with _registry_lock:
        _registry = None
