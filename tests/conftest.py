"""
QuickNotes Backend - Test Configuration (conftest.py)
======================================================

Fixture Hierarchy (all function-scoped):
    ├── note_store: Fresh, empty NoteStore
    ├── note_service: NoteService over note_store
    ├── test_settings: Settings with the default CORS allow-list
    ├── test_app: FastAPI app built around note_store
    └── test_client: HTTPX AsyncClient talking to test_app over ASGI
"""

import os

# Keep test output quiet; must be set before quicknotes.config is imported
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from quicknotes.config import Settings
from quicknotes.main import create_app
from quicknotes.services.note_service import NoteService
from quicknotes.store import NoteStore


@pytest.fixture
def note_store():
    """A brand new store for each test; nothing leaks between tests."""
    return NoteStore()


@pytest.fixture
def note_service(note_store):
    return NoteService(note_store)


@pytest.fixture
def test_settings():
    return Settings(cors_origins="http://localhost:5173,http://127.0.0.1:5173")


@pytest.fixture
def test_app(test_settings, note_store):
    return create_app(app_settings=test_settings, store=note_store)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient routed straight into the app (no server).

    Usage:
        async def test_healthz(test_client):
            response = await test_client.get("/healthz")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
