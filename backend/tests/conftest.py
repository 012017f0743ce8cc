"""Root conftest: shared test configuration."""

import os

import pytest

from status_demo.config import get_settings
from status_demo.infrastructure.static_assets import get_client_assets

# Tests never depend on the developer's shell
os.environ.pop("PORT", None)
os.environ.pop("NODE_PORT", None)
os.environ.pop("CLIENT_DIR", None)
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture(autouse=True)
def fresh_caches():
    """Settings and client assets are process-cached; reset around each test."""
    get_settings.cache_clear()
    get_client_assets.cache_clear()
    yield
    get_settings.cache_clear()
    get_client_assets.cache_clear()
