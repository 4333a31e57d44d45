"""
Todo API — Test Configuration (conftest.py)
============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── app: A fresh FastAPI application (own empty store)
    ├── store: A fresh InMemoryTodoStore
    ├── todo_payload: Valid TodoPartial for create/update tests
    └── test_client: HTTPX AsyncClient bound to `app`
"""

import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ["EXPLORER_PREFIX"] = "/explorer"

from todo_api.main import create_app  # noqa: E402
from todo_api.schemas.todo import TodoPartial  # noqa: E402
from todo_api.store import InMemoryTodoStore  # noqa: E402


@pytest.fixture
def app():
    """A fresh application; tests never share todos."""
    return create_app()


@pytest.fixture
def store():
    return InMemoryTodoStore()


@pytest.fixture
def todo_payload():
    return TodoPartial(title="Buy milk")


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    What:    HTTPX AsyncClient configured to talk to the FastAPI app.
    How:     Uses ASGITransport to route requests directly to the app.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/todos")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
