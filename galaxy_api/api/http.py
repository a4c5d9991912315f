"""Request and response descriptors passed between the router and its hosts."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from ..core.constants import CORS_HEADERS


@dataclass(frozen=True, slots=True)
class ApiRequest:
    method: str
    path: str
    body: str | None = None
    query: dict[str, str] = field(default_factory=dict)

    def json(self) -> dict[str, Any]:
        """Parse the body; an empty body reads as ``{}``.

        Raises ``json.JSONDecodeError`` for malformed text.
        """
        if not self.body:
            return {}
        return json.loads(self.body)


@dataclass(frozen=True, slots=True)
class ApiResponse:
    status_code: int
    body: Any = None
    headers: dict[str, str] = field(default_factory=lambda: dict(CORS_HEADERS))

    def render_body(self) -> str:
        if self.body is None:
            return ""
        return json.dumps(self.body)


def json_response(status_code: int, body: Any) -> ApiResponse:
    return ApiResponse(status_code=status_code, body=body)
