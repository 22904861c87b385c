"""Tests for WorkflowApiClient against the real app over an in-process transport."""

from __future__ import annotations

import httpx
import pytest

from doccat.api.app import create_app
from doccat.auth.identity import StaticIdentityService
from doccat.core.config import AppSettings
from doccat.core.exceptions import WorkflowSyncError
from doccat.workflow.client import WorkflowApiClient
from tests.fakes import MemorySessionStore


@pytest.fixture
def sessions():
    return MemorySessionStore()


@pytest.fixture
def api_client(sessions):
    def _build(token: str = "token-1") -> WorkflowApiClient:
        app = create_app(
            AppSettings(),
            session_store=sessions,
            identity=StaticIdentityService({"token-1": "user_1"}),
        )
        transport = httpx.ASGITransport(app=app)
        return WorkflowApiClient(
            "http://doccat.test",
            token,
            client=httpx.AsyncClient(transport=transport, base_url="http://doccat.test"),
        )
    return _build


@pytest.mark.asyncio
async def test_save_draft_round_trip(api_client, sessions):
    client = api_client()
    try:
        body = await client.save_draft({"documentId": "doc_004", "belongingRating": 3})
    finally:
        await client.aclose()

    assert body["success"] is True
    assert sessions.get("doc_004", "user_1").id == body["workflowId"]


@pytest.mark.asyncio
async def test_rejected_submit_raises_with_status(api_client):
    client = api_client()
    try:
        with pytest.raises(WorkflowSyncError) as excinfo:
            await client.submit({"documentId": "doc_004"})
    finally:
        await client.aclose()

    assert excinfo.value.message == "Incomplete workflow data"
    assert excinfo.value.remote_status == 400


@pytest.mark.asyncio
async def test_bad_token_raises(api_client):
    client = api_client(token="expired")
    try:
        with pytest.raises(WorkflowSyncError) as excinfo:
            await client.save_draft({"documentId": "doc_004"})
    finally:
        await client.aclose()

    assert excinfo.value.remote_status == 401


@pytest.mark.asyncio
async def test_transport_failure_raises():
    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = WorkflowApiClient(
        "http://doccat.test",
        "token-1",
        client=httpx.AsyncClient(transport=httpx.MockTransport(_refuse), base_url="http://doccat.test"),
    )
    try:
        with pytest.raises(WorkflowSyncError, match="unreachable"):
            await client.save_draft({"documentId": "doc_004"})
    finally:
        await client.aclose()


@pytest.mark.asyncio
async def test_non_object_reply_raises_with_status():
    def _gateway(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, json="Bad Gateway")

    client = WorkflowApiClient(
        "http://doccat.test",
        "token-1",
        client=httpx.AsyncClient(transport=httpx.MockTransport(_gateway), base_url="http://doccat.test"),
    )
    try:
        with pytest.raises(WorkflowSyncError) as excinfo:
            await client.submit({"documentId": "doc_004"})
    finally:
        await client.aclose()

    assert excinfo.value.remote_status == 502
    assert excinfo.value.message == "Workflow API returned HTTP 502"
