"""Demo Routes: catch-all bridge from HTTP requests to the core router.

Invariants:
    - Every path and every method reaches core.router.dispatch exactly once
    - Paths are matched still percent-encoded (/%73uccess is not /success)
    - Repeated Accept headers are read as one comma-joined value
    - Content-Type is the negotiated media type verbatim (no charset suffix)
    - Repeated query keys: first value wins
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import Response

from status_demo.core.handlers import DemoRequest
from status_demo.core.router import dispatch

logger = logging.getLogger(__name__)
router = APIRouter(tags=["demo"])


def _raw_path(request: Request) -> str:
    raw = request.scope.get("raw_path")
    if not raw:
        return request.url.path
    return raw.split(b"?", 1)[0].decode("latin-1")


def to_demo_request(request: Request) -> DemoRequest:
    """Extract path, query and Accept header from a Starlette request."""
    params = request.query_params
    accept = ", ".join(request.headers.getlist("accept"))
    return DemoRequest(
        path=_raw_path(request),
        query={key: params.getlist(key)[0] for key in params.keys()},
        accept=accept or None,
    )


async def demo(request: Request):
    """Dispatch any request to its demo handler by exact path."""
    demo_request = to_demo_request(request)
    result = dispatch(demo_request)
    logger.debug(
        f"{request.method} {demo_request.path} -> {result.status_code}",
        extra={
            "path": demo_request.path,
            "status_code": result.status_code,
            "media_type": result.media_type.value,
        },
    )
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers={"Content-Type": result.media_type.value},
    )


router.add_route("/{path:path}", demo, methods=None)
