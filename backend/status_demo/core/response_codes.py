"""Response Codes: symbolic name to HTTP status code table.

Invariants:
    - RESPONSE_CODES is built once at import time and is read-only
    - Writes raise TypeError (MappingProxyType)
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ResponseName(str, Enum):
    """Symbolic names for the demonstration responses."""
    SUCCESS = "success"
    BAD_REQUEST = "badRequest"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    INTERNAL_ERROR = "internalError"
    NOT_IMPLEMENTED = "notImplemented"
    NOT_FOUND = "notFound"


RESPONSE_CODES: Mapping[str, int] = MappingProxyType({
    ResponseName.SUCCESS.value: 200,
    ResponseName.BAD_REQUEST.value: 400,
    ResponseName.UNAUTHORIZED.value: 401,
    ResponseName.FORBIDDEN.value: 403,
    ResponseName.INTERNAL_ERROR.value: 500,
    ResponseName.NOT_IMPLEMENTED.value: 501,
    ResponseName.NOT_FOUND.value: 404,
})


def status_for(name: ResponseName) -> int:
    return RESPONSE_CODES[name.value]
