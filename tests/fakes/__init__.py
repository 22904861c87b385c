"""Shared test doubles: re-export memory backends plus a failing session store."""

from __future__ import annotations

from doccat.models.workflow import WorkflowSession
from doccat.persistence.memory_backend import (
    MemoryCacheBackend,
    MemorySessionStore,
    MemoryStateStorage,
)


class FailingSessionStore(MemorySessionStore):
    """ISessionStore whose writes always fail, for error-path tests."""

    def __init__(self, message: str = "connection reset by peer") -> None:
        super().__init__()
        self.message = message

    def upsert(self, session: WorkflowSession) -> WorkflowSession:
        raise RuntimeError(self.message)


__all__ = ["FailingSessionStore", "MemoryCacheBackend", "MemorySessionStore", "MemoryStateStorage"]
