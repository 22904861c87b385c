"""Protocol interfaces for doccat collaborators.

All inter-layer communication uses these Protocols: structural typing,
no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from doccat.models.workflow import WorkflowSession


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------

@runtime_checkable
class IIdentityService(Protocol):
    """Validates bearer tokens and exposes the caller's user id."""

    def verify(self, token: str) -> str: ...


# ---------------------------------------------------------------------------
# Persistence: Workflow Sessions
# ---------------------------------------------------------------------------

@runtime_checkable
class ISessionStore(Protocol):
    """Workflow session storage with upsert on (document_id, user_id)."""

    def upsert(self, session: WorkflowSession) -> WorkflowSession: ...

    def get(self, document_id: str, user_id: str) -> WorkflowSession | None: ...


# ---------------------------------------------------------------------------
# Persistence: Cache Backend
# ---------------------------------------------------------------------------

@runtime_checkable
class ICacheBackend(Protocol):
    """Redis-compatible cache interface."""

    def get(self, key: str) -> str | None: ...

    def setex(self, key: str, ttl: int, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


# ---------------------------------------------------------------------------
# Client State Storage
# ---------------------------------------------------------------------------

@runtime_checkable
class IStateStorage(Protocol):
    """Local key/value storage for the client workflow store snapshot."""

    def load(self, name: str) -> dict[str, Any] | None: ...

    def save(self, name: str, value: dict[str, Any]) -> None: ...

    def remove(self, name: str) -> None: ...
