"""API test fixtures — app built per environment + async HTTP client.

Invariants:
    - Every test builds its own app: no environment leaks between tests
    - The lifespan is entered explicitly (ASGITransport does not run it)

Design Decisions:
    - make_client factory fixture: tests choose schemas/environ/settings per case
"""

from contextlib import asynccontextmanager
from typing import Literal

import pytest
from httpx import ASGITransport, AsyncClient

from envgate.config import Settings
from envgate.main import create_app

SERVER = {
    "NODE_ENV": Literal["development", "test", "production"],
    "DATABASE_URL": str,
}
CLIENT = {"NEXT_PUBLIC_API_URL": str, "NEXT_PUBLIC_FLAGS": (str, "")}
ENVIRON = {
    "NODE_ENV": "test",
    "DATABASE_URL": "postgres://user:secret@db/app",
    "NEXT_PUBLIC_API_URL": "https://api.example.com",
}


@pytest.fixture
def make_client():
    """Returns an async context manager yielding (app, client)."""

    @asynccontextmanager
    async def _make(
        client_schema=CLIENT, server_schema=SERVER, environ=None, settings=None,
    ):
        app = create_app(
            client_schema, server_schema,
            settings=settings or Settings(log_format="text"),
            environ=ENVIRON if environ is None else environ,
        )
        async with app.router.lifespan_context(app):
            async with AsyncClient(
                transport=ASGITransport(app=app), base_url="http://test",
            ) as c:
                yield app, c

    return _make
