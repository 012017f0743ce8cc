"""Content Negotiation: pick JSON or XML from the Accept header.

Invariants:
    - XML only when the Accept header contains the substring "text/xml"
    - A missing Accept header resolves to JSON (never raises)
"""

from enum import Enum


class MediaType(str, Enum):
    """Representations a demo handler can emit."""
    JSON = "application/json"
    XML = "text/xml"


XML_MARKER = "text/xml"


def negotiate(accept: str | None) -> MediaType:
    """Return the media type to respond with for an Accept header value."""
    if accept and XML_MARKER in accept:
        return MediaType.XML
    return MediaType.JSON
