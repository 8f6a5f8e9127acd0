"""Per-browser-session stores, kept in process memory only."""

from __future__ import annotations

import logging
import secrets
from collections import OrderedDict
from typing import Callable, Optional, Tuple

from src.ui.config import DEFAULT_MAX_SESSIONS
from src.ui.store import NotesStore

logger = logging.getLogger("notes_ui.sessions")


class SessionRegistry:
    """Maps session ids to their NotesStore; unknown ids get a fresh store.

    At most ``max_sessions`` stores are kept. Starting a session beyond that
    evicts the least recently used one.
    """

    def __init__(
        self,
        store_factory: Callable[[], NotesStore] = NotesStore,
        max_sessions: int = DEFAULT_MAX_SESSIONS,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._store_factory = store_factory
        self._max_sessions = max_sessions
        self._stores: "OrderedDict[str, NotesStore]" = OrderedDict()

    def get_or_create(self, session_id: Optional[str]) -> Tuple[str, NotesStore]:
        if session_id and session_id in self._stores:
            self._stores.move_to_end(session_id)
            return session_id, self._stores[session_id]
        new_id = secrets.token_urlsafe(16)
        store = self._store_factory()
        self._stores[new_id] = store
        logger.info("Started session with %d notes", len(store.state.notes))
        while len(self._stores) > self._max_sessions:
            self._stores.popitem(last=False)
            logger.info("Evicted least recently used session")
        return new_id, store

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._stores

    def __len__(self) -> int:
        return len(self._stores)

    def clear(self) -> None:
        self._stores.clear()
