"""Status Demo API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly, client before demo (demo is the catch-all)
    - Client assets loaded on startup via lifespan; a missing file aborts startup
    - Global error handlers map StatusDemoError → structured JSON responses
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from status_demo.api.error_handlers import register_error_handlers
from status_demo.api.routes import client, demo
from status_demo.config import get_settings
from status_demo.infrastructure.observability import setup_logging
from status_demo.infrastructure.static_assets import get_client_assets

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    get_client_assets()
    logger.info(
        f"Listening on port {settings.port}", extra={"port": settings.port},
    )
    yield
    logger.info("Status demo shutting down")


app = FastAPI(
    title="Status Demo API", version="1.0.0", lifespan=lifespan,
    # docs routes would shadow demo paths such as /docs
    docs_url=None, redoc_url=None, openapi_url=None,
)

register_error_handlers(app)

app.include_router(client.router)
app.include_router(demo.router)
