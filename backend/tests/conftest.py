"""Root conftest — shared test configuration and fixtures."""

import os
from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

# Keep test logs readable and independent of a developer's .env
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from payment_instructions.main import app  # noqa: E402

TODAY = date(2025, 6, 15)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def usd_accounts() -> list[dict]:
    """Two USD accounts, a (230) and b (300), in that request order."""
    return [
        {"id": "a", "balance": 230, "currency": "USD"},
        {"id": "b", "balance": 300, "currency": "USD"},
    ]


@pytest.fixture
async def client():
    """FastAPI test client over ASGI transport."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
