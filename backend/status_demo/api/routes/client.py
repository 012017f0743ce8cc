"""Client Routes: serve the pre-loaded HTML page and stylesheet.

Invariants:
    - / returns text/html, /style.css returns text/css, for any method
    - Assets come from get_client_assets (read once, cached)
"""

from fastapi import APIRouter, Request
from fastapi.responses import Response

from status_demo.infrastructure.static_assets import get_client_assets

router = APIRouter(tags=["client"])


async def get_index(request: Request):
    return Response(
        content=get_client_assets().html,
        headers={"Content-Type": "text/html"},
    )


async def get_css(request: Request):
    return Response(
        content=get_client_assets().css,
        headers={"Content-Type": "text/css"},
    )


router.add_route("/", get_index, methods=None, include_in_schema=False)
router.add_route("/style.css", get_css, methods=None, include_in_schema=False)
