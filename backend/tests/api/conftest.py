"""API test fixtures: FastAPI app over httpx ASGITransport.

Invariants:
    - ASGITransport does not run lifespan; client assets load lazily
      through get_client_assets on first request
"""

import pytest
from httpx import ASGITransport, AsyncClient

from status_demo.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def lenient_client():
    """Client that returns the 500 response instead of re-raising app errors."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
