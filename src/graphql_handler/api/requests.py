"""Build Starlette requests from plain values, for callers that are not behind an ASGI server."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import urlencode

from starlette.requests import Request
from starlette.types import Message


def build_request(
    method: str = "GET",
    url_params: Mapping[str, str] | None = None,
    body: bytes | str = b"",
    headers: Mapping[str, str] | None = None,
    path: str = "/graphql",
) -> Request:
    raw_body = body.encode("utf-8") if isinstance(body, str) else body
    scope = {
        "type": "http",
        "http_version": "1.1",
        "method": method.upper(),
        "scheme": "http",
        "server": ("localhost", 80),
        "path": path,
        "raw_path": path.encode(),
        "root_path": "",
        "query_string": urlencode(dict(url_params or {})).encode(),
        "headers": [(k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in (headers or {}).items()],
    }
    sent = False

    async def receive() -> Message:
        nonlocal sent
        if sent:
            return {"type": "http.disconnect"}
        sent = True
        return {"type": "http.request", "body": raw_body, "more_body": False}

    return Request(scope, receive)
