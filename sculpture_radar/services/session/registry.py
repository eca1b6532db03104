"""In-memory session registry with LRU eviction and idle TTL.

Process-level only: sessions do not survive a restart and are not shared
between uvicorn workers.
"""

import time
from collections import OrderedDict
from uuid import uuid4

from .state import SessionState


class SessionRegistry:
    """TTL-aware LRU map of session id to ``SessionState``."""

    def __init__(self, max_size: int = 1000, ttl_seconds: int = 3600) -> None:
        self._sessions: OrderedDict[str, tuple[float, SessionState]] = OrderedDict()
        self._max_size = max_size
        self._ttl = ttl_seconds

    def get(self, session_id: str) -> SessionState | None:
        if session_id not in self._sessions:
            return None
        ts, session = self._sessions[session_id]
        if time.time() - ts > self._ttl:
            del self._sessions[session_id]
            return None
        self._touch(session_id, session)
        return session

    def get_or_create(self, session_id: str | None = None) -> tuple[str, SessionState]:
        """Look up a session, or start a fresh one under a new or given id."""
        if session_id:
            session = self.get(session_id)
            if session is not None:
                return session_id, session
        else:
            session_id = uuid4().hex
        session = SessionState()
        self._touch(session_id, session)
        return session_id, session

    def _touch(self, session_id: str, session: SessionState) -> None:
        if session_id in self._sessions:
            self._sessions.move_to_end(session_id)
        self._sessions[session_id] = (time.time(), session)
        if len(self._sessions) > self._max_size:
            self._sessions.popitem(last=False)

    def __len__(self) -> int:
        return len(self._sessions)
