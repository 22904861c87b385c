"""In-memory backends for development and unit tests, dict-backed."""

from __future__ import annotations

import threading
from typing import Any

from doccat.models.workflow import WorkflowSession


class MemorySessionStore:
    """Dict-backed ISessionStore keyed by (document_id, user_id)."""

    def __init__(self) -> None:
        self._sessions: dict[tuple[str, str], WorkflowSession] = {}
        self._lock = threading.Lock()

    def upsert(self, session: WorkflowSession) -> WorkflowSession:
        key = (session.document_id, session.user_id)
        with self._lock:
            existing = self._sessions.get(key)
            if existing is not None:
                session = session.model_copy(
                    update={"id": existing.id, "created_at": existing.created_at}
                )
            self._sessions[key] = session.model_copy(deep=True)
        return session.model_copy(deep=True)

    def get(self, document_id: str, user_id: str) -> WorkflowSession | None:
        with self._lock:
            session = self._sessions.get((document_id, user_id))
        return session.model_copy(deep=True) if session is not None else None

    def list_sessions(self) -> list[WorkflowSession]:
        with self._lock:
            return [s.model_copy(deep=True) for s in self._sessions.values()]


class MemoryCacheBackend:
    """Dict-backed ICacheBackend for unit tests."""

    def __init__(self) -> None:
        self._store: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def setex(self, key: str, ttl: int, value: str) -> None:
        self._store[key] = value

    def delete(self, key: str) -> None:
        self._store.pop(key, None)


class MemoryStateStorage:
    """Dict-backed IStateStorage for the client workflow store."""

    def __init__(self) -> None:
        self._values: dict[str, dict[str, Any]] = {}

    def load(self, name: str) -> dict[str, Any] | None:
        return self._values.get(name)

    def save(self, name: str, value: dict[str, Any]) -> None:
        self._values[name] = value

    def remove(self, name: str) -> None:
        self._values.pop(name, None)
