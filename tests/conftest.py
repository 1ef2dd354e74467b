"""
Simple Notes Backend: Test Configuration (conftest.py)
========================================================

Shared pytest fixtures for the entire test suite.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── clock:        FakeClock advancing one second per reading
    ├── store:        NotesStore driven by `clock`
    ├── note_service: NoteService over `store`
    ├── app:          create_app(store) with its own empty collection
    └── test_client:  HTTPX AsyncClient talking to `app` in-process
"""

import os

# Set before the application is imported so Settings() picks them up
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CORS_ORIGINS"] = "*"

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from notes_backend.main import create_app
from notes_backend.services.note_service import NoteService
from notes_backend.store.notes_store import NotesStore


class FakeClock:
    """
    Deterministic clock: every call returns a time one `step` later.

    `freeze()` makes subsequent readings repeat the current value, and
    `rewind()` moves time backwards, for exercising coarse or unstable clocks.
    """

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.now = start or datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        current = self.now
        self.now = self.now + self.step
        return current

    def freeze(self):
        self.step = timedelta(0)

    def rewind(self, delta):
        self.now = self.now - delta


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return NotesStore(clock=clock)


@pytest.fixture
def note_service(store):
    return NoteService(store)


@pytest.fixture
def app(store):
    return create_app(store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight to the ASGI app (no server needed).

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
