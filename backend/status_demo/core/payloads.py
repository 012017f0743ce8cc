"""Payloads: canned demo bodies and their JSON/XML renderings.

Invariants:
    - JSON uses compact separators, key order message then id
    - XML is <response><message>...</message>[<id>...</id>]</response>, no prolog
    - id is omitted entirely (not null) when absent
"""

import json
from dataclasses import dataclass
from xml.sax.saxutils import escape

from status_demo.core.negotiation import MediaType


@dataclass(frozen=True)
class DemoPayload:
    message: str
    id: str | None = None

    def to_json(self) -> str:
        data = {"message": self.message}
        if self.id is not None:
            data["id"] = self.id
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    def to_xml(self) -> str:
        parts = [f"<message>{escape(self.message)}</message>"]
        if self.id is not None:
            parts.append(f"<id>{escape(self.id)}</id>")
        return f"<response>{''.join(parts)}</response>"

    def render(self, media_type: MediaType) -> str:
        if media_type is MediaType.XML:
            return self.to_xml()
        return self.to_json()


# ─── Canned Bodies ───────────────────────────────────────────────

SUCCESS = DemoPayload("This is a successful response.")
HAS_REQUIRED_PARAMS = DemoPayload("This request has the required parameters.")
MISSING_VALID = DemoPayload(
    "Missing valid query parameter set to true.", "badRequest",
)
HAD_REQUIRED_PARAMS = DemoPayload("This request had the required parameters.")
MISSING_LOGGED_IN = DemoPayload(
    "Missing loggedIn query parameter set to yes.", "unauthorized",
)
FORBIDDEN = DemoPayload(
    "You do not have access to this content.", "forbidden",
)
INTERNAL_ERROR = DemoPayload(
    "Internal Server Error. Something went wrong.", "internalError",
)
NOT_IMPLEMENTED = DemoPayload(
    "A get request for this page has not been implemented yet. "
    "Check again later for updated content.",
    "notImplemented",
)
NOT_FOUND = DemoPayload(
    "The page you are looking for was not found.", "notFound",
)
