"""Serverless entry point for Netlify/Lambda style function runtimes.

The runtime hands over an event dict (``httpMethod``, ``path``, ``body``,
``queryStringParameters``) and expects ``{statusCode, headers, body}`` back,
with ``body`` already serialised.
"""

from __future__ import annotations

import base64
import logging
from functools import lru_cache
from typing import Any

from .api.deps import build_router
from .api.http import ApiRequest, ApiResponse, json_response
from .api.router import RequestRouter
from .config import get_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_router() -> RequestRouter:
    # One router, and so one session table, per warm function instance.
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    return build_router(settings)


def event_to_request(event: dict[str, Any]) -> ApiRequest:
    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode("utf-8", errors="replace")
    return ApiRequest(
        method=event.get("httpMethod") or "GET",
        path=event.get("path") or "/",
        body=body,
        query=dict(event.get("queryStringParameters") or {}),
    )


def handler(event: dict[str, Any], context: Any, router: RequestRouter | None = None) -> dict[str, Any]:
    # Event decoding and the cold-start router build fail with the same 500 shape.
    try:
        request = event_to_request(event)
        router = router or get_router()
    except Exception as exc:
        logger.exception("Function invocation failed before routing")
        result: ApiResponse = json_response(
            500, {"message": "Internal server error", "error": str(exc)}
        )
    else:
        result = router.handle(request)
    return {
        "statusCode": result.status_code,
        "headers": result.headers,
        "body": result.render_body(),
    }
