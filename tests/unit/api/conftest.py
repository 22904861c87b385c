"""Shared fixtures for API tests: an in-memory app and a FastAPI TestClient."""

from __future__ import annotations

import random

import pytest
from fastapi.testclient import TestClient

from doccat.api.app import create_app
from doccat.auth.identity import StaticIdentityService
from doccat.catalog.catalog import ReferenceCatalog
from doccat.core.config import AppSettings
from tests.fakes import MemorySessionStore

TOKEN = "token-1"
AUTH = {"Authorization": f"Bearer {TOKEN}"}


@pytest.fixture
def session_store():
    return MemorySessionStore()


@pytest.fixture
def app(session_store):
    return create_app(
        AppSettings(),
        session_store=session_store,
        identity=StaticIdentityService({TOKEN: "user_1"}),
        catalog=ReferenceCatalog(rng=random.Random(7)),
    )


@pytest.fixture
def client(app):
    return TestClient(app)
