"""Router: exact-match dispatch from URL path to handler.

Invariants:
    - Exact string match only (no prefix match, no trailing-slash folding)
    - Method is ignored; every route answers every method
    - Unmapped paths resolve to not_found, so every request gets a response
"""

from types import MappingProxyType
from typing import Mapping

from status_demo.core import handlers
from status_demo.core.handlers import DemoRequest, DemoResponse, Handler

ROUTES: Mapping[str, Handler] = MappingProxyType({
    "/success": handlers.success,
    "/badRequest": handlers.bad_request,
    "/unauthorized": handlers.unauthorized,
    "/forbidden": handlers.forbidden,
    "/internal": handlers.internal,
    "/notImplemented": handlers.not_implemented,
    "/notFound": handlers.not_found,
})


def resolve(path: str) -> Handler:
    return ROUTES.get(path, handlers.not_found)


def dispatch(request: DemoRequest) -> DemoResponse:
    """Resolve the handler for request.path and invoke it."""
    return resolve(request.path)(request)
