"""Turn pipeline outcomes into HTTP responses with a JSON body."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from graphql import ExecutionResult

from graphql_handler.core.orchestrator import ALLOWED_METHODS
from graphql_handler.core.ports.engine import ErrorFormatter
from graphql_handler.models import ExecutionOutcome, HandlerResponse, Outcome, TypedFailure


def dump_json(payload: Mapping[str, Any], pretty: bool) -> str:
    if pretty:
        return json.dumps(payload, indent=2, ensure_ascii=False)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def _serialize_data(result: ExecutionResult) -> bool:
    """``data: null`` is kept only when execution started and a field error nulled the root."""
    if result.data is not None:
        return True
    return any(error.path for error in result.errors or ())


def format_outcome(
    outcome: Outcome,
    pretty: bool,
    base_headers: Mapping[str, str],
    format_error: ErrorFormatter,
) -> HandlerResponse:
    if isinstance(outcome, TypedFailure):
        return format_failure(outcome, pretty, base_headers, format_error)
    return format_execution(outcome, pretty, base_headers, format_error)


def format_execution(
    outcome: ExecutionOutcome,
    pretty: bool,
    base_headers: Mapping[str, str],
    format_error: ErrorFormatter,
) -> HandlerResponse:
    result = outcome.result
    body: dict[str, Any] = {}
    if result.errors:
        body["errors"] = [format_error(error) for error in result.errors]
    if _serialize_data(result):
        body["data"] = result.data
    if outcome.extensions is not None:
        body["extensions"] = outcome.extensions
    return HandlerResponse(
        status=200 if result.data is not None else 500,
        headers=dict(base_headers),
        body=dump_json(body, pretty),
    )


def format_failure(
    failure: TypedFailure,
    pretty: bool,
    base_headers: Mapping[str, str],
    format_error: ErrorFormatter,
) -> HandlerResponse:
    return HandlerResponse(
        status=failure.status or 500,
        headers={**base_headers, **failure.headers},
        body=dump_json({"errors": [format_error(error) for error in failure.errors]}, pretty),
    )


def preflight_response(method: str, allow_origins: str | None) -> HandlerResponse | None:
    """Answer a CORS preflight, or ``None`` when the request is not one we short-circuit."""
    if method != "OPTIONS" or not allow_origins:
        return None
    return HandlerResponse(
        status=204,
        headers={
            "Allow": ALLOWED_METHODS,
            "Access-Control-Allow-Methods": ALLOWED_METHODS,
            "Access-Control-Allow-Origin": allow_origins,
        },
        body="",
    )
