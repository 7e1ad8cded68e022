"""Extract ``query``, ``variables`` and ``operationName`` from a request.

Values from the URL query string always win over values from the body, field by field.
"""

from __future__ import annotations

import json
from typing import Any

from starlette.datastructures import QueryParams
from starlette.requests import ClientDisconnect

from graphql_handler.core.ports.request import IncomingRequest
from graphql_handler.models import ParsedParams, TypedFailure

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
GRAPHQL_CONTENT_TYPE = "application/graphql"


async def _read_text(request: IncomingRequest) -> str:
    return (await request.body()).decode("utf-8")


async def _params_from_body(request: IncomingRequest) -> dict[str, Any]:
    """Return the fields contributed by a POST body, keyed as on the wire."""
    if request.method != "POST":
        return {}
    content_type = (request.headers.get("content-type") or "").lower()

    if JSON_CONTENT_TYPE in content_type:
        payload = json.loads(await _read_text(request))
        # A JSON body that is not an object (e.g. ``[]``) carries no parameters.
        return payload if isinstance(payload, dict) else {}

    if FORM_CONTENT_TYPE in content_type:
        form = QueryParams(await _read_text(request))
        variables = form.get("variables")
        return {
            "query": form.get("query"),
            "variables": json.loads(variables) if variables else None,
            "operationName": form.get("operationName"),
        }

    if GRAPHQL_CONTENT_TYPE in content_type:
        return {"query": await _read_text(request)}

    return {}


def _decode_variables(from_url: str | None, from_body: Any) -> Any:
    if from_url:
        return json.loads(from_url)
    if isinstance(from_body, str):
        return json.loads(from_body)
    return from_body


async def resolve_params(request: IncomingRequest) -> ParsedParams | TypedFailure:
    """Merge URL and body parameters; any decoding problem is a 400 failure."""
    url = request.query_params
    try:
        body = await _params_from_body(request)
        variables = _decode_variables(url.get("variables"), body.get("variables"))
    except (ValueError, RecursionError, ClientDisconnect) as exc:
        return TypedFailure.of(400, exc)

    return ParsedParams(
        query=url.get("query") or body.get("query"),
        variables=variables,
        operation_name=url.get("operationName") or body.get("operationName"),
    )
