"""Response Handlers: one pure function per demo endpoint.

Invariants:
    - Every handler returns exactly one DemoResponse, never raises
    - Media type comes from negotiate(); status from RESPONSE_CODES
    - Query conditions are exact, case-sensitive string matches

Design Decisions:
    - Handlers take a DemoRequest value, never a framework request
"""

from dataclasses import dataclass, field
from typing import Callable, Mapping

from status_demo.core import payloads
from status_demo.core.negotiation import MediaType, negotiate
from status_demo.core.payloads import DemoPayload
from status_demo.core.response_codes import ResponseName, status_for


@dataclass(frozen=True)
class DemoRequest:
    """Read-only view of the parts of a request the handlers inspect."""
    path: str
    query: Mapping[str, str] = field(default_factory=dict)
    accept: str | None = None


@dataclass(frozen=True)
class DemoResponse:
    status_code: int
    media_type: MediaType
    body: str


Handler = Callable[[DemoRequest], DemoResponse]


def _respond(
    request: DemoRequest, name: ResponseName, payload: DemoPayload,
) -> DemoResponse:
    media_type = negotiate(request.accept)
    return DemoResponse(
        status_code=status_for(name),
        media_type=media_type,
        body=payload.render(media_type),
    )


def success(request: DemoRequest) -> DemoResponse:
    """200 with a success message."""
    return _respond(request, ResponseName.SUCCESS, payloads.SUCCESS)


def bad_request(request: DemoRequest) -> DemoResponse:
    """200 when ?valid=true, otherwise 400."""
    if request.query.get("valid") == "true":
        return _respond(
            request, ResponseName.SUCCESS, payloads.HAS_REQUIRED_PARAMS,
        )
    return _respond(request, ResponseName.BAD_REQUEST, payloads.MISSING_VALID)


def unauthorized(request: DemoRequest) -> DemoResponse:
    """200 when ?loggedIn=yes, otherwise 401."""
    if request.query.get("loggedIn") == "yes":
        return _respond(
            request, ResponseName.SUCCESS, payloads.HAD_REQUIRED_PARAMS,
        )
    return _respond(
        request, ResponseName.UNAUTHORIZED, payloads.MISSING_LOGGED_IN,
    )


def forbidden(request: DemoRequest) -> DemoResponse:
    return _respond(request, ResponseName.FORBIDDEN, payloads.FORBIDDEN)


def internal(request: DemoRequest) -> DemoResponse:
    return _respond(
        request, ResponseName.INTERNAL_ERROR, payloads.INTERNAL_ERROR,
    )


def not_implemented(request: DemoRequest) -> DemoResponse:
    return _respond(
        request, ResponseName.NOT_IMPLEMENTED, payloads.NOT_IMPLEMENTED,
    )


def not_found(request: DemoRequest) -> DemoResponse:
    """404, also the fallback for every unmapped path."""
    return _respond(request, ResponseName.NOT_FOUND, payloads.NOT_FOUND)
