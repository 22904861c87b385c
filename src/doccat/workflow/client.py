"""Async HTTP client for the workflow API, used by WorkflowStore for remote sync."""

from __future__ import annotations

from typing import Any

import httpx

from doccat.core.exceptions import WorkflowSyncError
from doccat.core.logging import get_logger

LOGGER = get_logger(__name__)


class WorkflowApiClient:
    """Posts save_draft / submit actions to ``/api/workflow`` with a bearer token."""

    def __init__(self, base_url: str, token: str, *, client: httpx.AsyncClient | None = None,
                 timeout: float = 10.0) -> None:
        self._token = token
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _post(self, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            resp = await self._client.post(
                "/api/workflow",
                json=payload,
                headers={"Authorization": f"Bearer {self._token}"},
            )
        except httpx.HTTPError as exc:
            LOGGER.warning("Workflow API %s request failed: %s", payload.get("action"), exc)
            raise WorkflowSyncError(f"Workflow API unreachable: {exc}") from exc

        try:
            body = resp.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if resp.status_code >= 400 or not body.get("success", False):
            message = body.get("error") or f"Workflow API returned HTTP {resp.status_code}"
            LOGGER.warning("Workflow API %s rejected: %s", payload.get("action"), message)
            raise WorkflowSyncError(message, status_code=resp.status_code)
        return body

    async def save_draft(self, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._post({**payload, "action": "save_draft"})

    async def submit(self, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._post({**payload, "action": "submit"})
