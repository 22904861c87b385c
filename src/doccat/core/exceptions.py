"""doccat exception hierarchy.

Every error carries the HTTP status the API renders it with, so route
handlers can raise instead of building error responses by hand.
"""

from __future__ import annotations


class DocCatError(Exception):
    """Base exception for all doccat errors."""

    status_code = 500

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class BadRequestError(DocCatError):
    """Request body is missing fields or malformed."""

    status_code = 400


class InvalidActionError(BadRequestError):
    """Workflow action is not one of save_draft, submit, validate."""

    def __init__(self, action: str | None = None) -> None:
        self.action = action
        super().__init__("Invalid action")


class IncompleteWorkflowError(BadRequestError):
    """Submission lacks a rating, category or tags."""

    def __init__(self, missing: list[str] | None = None) -> None:
        self.missing = missing or []
        super().__init__("Incomplete workflow data")


class AuthenticationError(DocCatError):
    """Caller could not be authenticated."""

    status_code = 401


class DocumentNotFoundError(DocCatError):
    """No document with the requested id."""

    status_code = 404

    def __init__(self, document_id: str) -> None:
        self.document_id = document_id
        super().__init__("Document not found")


class SessionNotFoundError(DocCatError):
    """No workflow session for the (document, user) pair."""

    status_code = 404

    def __init__(self, document_id: str, user_id: str) -> None:
        self.document_id = document_id
        self.user_id = user_id
        super().__init__("Workflow session not found")


class PersistenceError(DocCatError):
    """Session store operation failed."""


class CacheError(DocCatError):
    """Redis cache operation failed."""


class WorkflowSyncError(DocCatError):
    """Client-side draft sync or submission to the workflow API failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.remote_status = status_code
        super().__init__(message)
