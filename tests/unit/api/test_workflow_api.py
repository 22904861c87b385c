"""Tests for POST /api/workflow and GET /api/workflow/{document_id}."""

from __future__ import annotations

import time

import jwt
from fastapi.testclient import TestClient

from doccat.api.app import create_app
from doccat.auth.identity import StaticIdentityService
from doccat.core.config import AppSettings, AuthConfig
from tests.fakes import FailingSessionStore
from tests.unit.api.conftest import AUTH, TOKEN

COMPLETE = {
    "documentId": "doc_001",
    "belongingRating": 4,
    "selectedCategory": "strategic-planning",
    "selectedTags": {
        "authorship": ["self-authored"],
        "disclosure-risk": ["confidential"],
        "intended-use": ["decision-making"],
    },
}


class TestRequestDecoding:
    def test_invalid_json(self, client):
        resp = client.post("/api/workflow", content=b"{nope", headers={"Content-Type": "application/json"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid JSON body", "success": False}

    def test_missing_document_id(self, client):
        resp = client.post("/api/workflow", json={"action": "save_draft"}, headers=AUTH)
        assert resp.status_code == 400
        assert resp.json()["error"] == "Missing required fields"

    def test_missing_action(self, client):
        resp = client.post("/api/workflow", json={"documentId": "doc_001"}, headers=AUTH)
        assert resp.status_code == 400
        assert resp.json()["error"] == "Missing required fields"

    def test_unknown_action(self, client):
        resp = client.post("/api/workflow", json={"documentId": "doc_001", "action": "archive"}, headers=AUTH)
        assert resp.status_code == 400
        assert resp.json()["error"] == "Invalid action"


class TestAuthentication:
    def test_save_draft_requires_header(self, client):
        resp = client.post("/api/workflow", json={"documentId": "doc_001", "action": "save_draft"})
        assert resp.status_code == 401
        assert resp.json() == {"error": "Authentication required", "success": False}
        assert resp.headers["WWW-Authenticate"] == "Bearer"

    def test_rejects_non_bearer_scheme(self, client):
        resp = client.post(
            "/api/workflow",
            json={"documentId": "doc_001", "action": "submit"},
            headers={"Authorization": f"Basic {TOKEN}"},
        )
        assert resp.status_code == 401
        assert resp.json()["error"] == "Invalid authentication scheme. Use Bearer token."

    def test_rejects_unknown_token(self, client):
        resp = client.post(
            "/api/workflow",
            json={"documentId": "doc_001", "action": "save_draft"},
            headers={"Authorization": "Bearer stolen"},
        )
        assert resp.status_code == 401

    def test_validate_is_anonymous(self, client):
        resp = client.post(
            "/api/workflow",
            json={"documentId": "doc_001", "action": "validate", "step": "A", "belongingRating": 3},
        )
        assert resp.status_code == 200
        assert resp.json() == {"valid": True, "errors": {}, "success": True}


class TestSaveDraft:
    def test_creates_draft(self, client, session_store):
        resp = client.post(
            "/api/workflow",
            json={"documentId": "doc_001", "action": "save_draft", "belongingRating": 2, "step": "A"},
            headers=AUTH,
        )
        body = resp.json()
        assert resp.status_code == 200
        assert body["success"] is True
        assert body["message"] == "Draft saved successfully"
        assert body["documentStatus"] == "categorizing"

        session = session_store.get("doc_001", "user_1")
        assert session.id == body["workflowId"]
        assert session.is_draft is True
        assert session.belonging_rating == 2

    def test_repeated_saves_update_one_session(self, client, session_store):
        payload = {"documentId": "doc_001", "action": "save_draft"}
        first = client.post("/api/workflow", json={**payload, "belongingRating": 1}, headers=AUTH).json()
        second = client.post(
            "/api/workflow",
            json={**payload, "belongingRating": 5, "selectedCategory": {"id": "operational"}},
            headers=AUTH,
        ).json()

        assert first["workflowId"] == second["workflowId"]
        assert len(session_store.list_sessions()) == 1
        session = session_store.get("doc_001", "user_1")
        assert session.belonging_rating == 5
        assert session.selected_category_id == "operational"

    def test_store_failure_is_500_with_details(self):
        app = create_app(
            AppSettings(),
            session_store=FailingSessionStore("disk full"),
            identity=StaticIdentityService({TOKEN: "user_1"}),
        )
        resp = TestClient(app).post(
            "/api/workflow", json={"documentId": "doc_001", "action": "save_draft"}, headers=AUTH,
        )
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to save draft", "success": False, "details": "disk full"}


class TestSubmit:
    def test_incomplete_submit(self, client, session_store):
        resp = client.post(
            "/api/workflow",
            json={"documentId": "doc_001", "action": "submit", "belongingRating": 3},
            headers=AUTH,
        )
        assert resp.status_code == 400
        assert resp.json()["error"] == "Incomplete workflow data"
        assert session_store.get("doc_001", "user_1") is None

    def test_rating_zero_counts_as_present(self, client):
        resp = client.post(
            "/api/workflow",
            json={**COMPLETE, "action": "submit", "belongingRating": 0},
            headers=AUTH,
        )
        assert resp.status_code == 200

    def test_submit_finalizes_existing_draft(self, client, session_store):
        draft = client.post(
            "/api/workflow", json={"documentId": "doc_001", "action": "save_draft"}, headers=AUTH,
        ).json()
        resp = client.post("/api/workflow", json={**COMPLETE, "action": "submit"}, headers=AUTH)
        body = resp.json()

        assert resp.status_code == 200
        assert body["workflowId"] == draft["workflowId"]
        assert body["message"] == "Workflow submitted successfully"
        assert body["processingEstimate"] == "5-10 minutes"
        assert body["documentStatus"] == "completed"

        session = session_store.get("doc_001", "user_1")
        assert session.is_draft is False
        assert session.step == "complete"
        assert session.completed_steps == ["A", "B", "C"]
        assert session.submitted_at is not None

    def test_store_failure_is_500(self):
        app = create_app(
            AppSettings(),
            session_store=FailingSessionStore(),
            identity=StaticIdentityService({TOKEN: "user_1"}),
        )
        resp = TestClient(app).post("/api/workflow", json={**COMPLETE, "action": "submit"}, headers=AUTH)
        assert resp.status_code == 500
        assert resp.json()["error"] == "Failed to submit workflow"


class TestValidate:
    def test_step_b_without_category(self, client):
        resp = client.post("/api/workflow", json={"documentId": "doc_001", "action": "validate", "step": "B"})
        assert resp.json() == {
            "valid": False,
            "errors": {"selectedCategory": "Please select a primary category"},
            "success": True,
        }

    def test_step_c_reports_each_missing_dimension(self, client):
        resp = client.post(
            "/api/workflow",
            json={
                "documentId": "doc_001",
                "action": "validate",
                "step": "C",
                "selectedTags": {"authorship": ["external"]},
            },
        )
        errors = resp.json()["errors"]
        assert set(errors) == {"disclosure-risk", "intended-use"}
        assert errors["disclosure-risk"] == "Please select at least one disclosure risk tag"

    def test_unknown_step_is_valid(self, client):
        resp = client.post("/api/workflow", json={"documentId": "doc_001", "action": "validate", "step": "Z"})
        assert resp.json()["valid"] is True


class TestGetSession:
    def test_returns_saved_session(self, client):
        client.post("/api/workflow", json={"documentId": "doc_002", "action": "save_draft"}, headers=AUTH)
        resp = client.get("/api/workflow/doc_002", headers=AUTH)
        assert resp.status_code == 200
        assert resp.json()["session"]["document_id"] == "doc_002"

    def test_unknown_session_is_404(self, client):
        resp = client.get("/api/workflow/doc_003", headers=AUTH)
        assert resp.status_code == 404
        assert resp.json()["success"] is False

    def test_requires_authentication(self, client):
        assert client.get("/api/workflow/doc_002").status_code == 401


class TestJWTAuthentication:
    SECRET = "api-test-secret-with-enough-bytes"

    def _client(self, session_store) -> TestClient:
        settings = AppSettings(auth=AuthConfig(provider="jwt", jwt_secret=self.SECRET))
        return TestClient(create_app(settings, session_store=session_store))

    def _token(self, **claims) -> str:
        now = int(time.time())
        payload = {"sub": "user_jwt", "aud": "authenticated", "iat": now, "exp": now + 600}
        payload.update(claims)
        return jwt.encode(payload, self.SECRET, algorithm="HS256")

    def test_list_audience_token_saves_draft(self, session_store):
        token = self._token(aud=["authenticated", "storage"])
        resp = self._client(session_store).post(
            "/api/workflow",
            json={"documentId": "doc_001", "action": "save_draft"},
            headers={"Authorization": f"Bearer {token}"},
        )
        assert resp.status_code == 200
        assert session_store.get("doc_001", "user_jwt") is not None

    def test_malformed_claims_are_401_on_session_read(self, session_store):
        token = self._token(email=["not", "a", "string"])
        resp = self._client(session_store).get(
            "/api/workflow/doc_001", headers={"Authorization": f"Bearer {token}"},
        )
        assert resp.status_code == 401
        assert resp.json()["error"] == "Invalid authentication token"
