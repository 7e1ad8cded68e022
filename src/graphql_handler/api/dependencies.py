from __future__ import annotations

import inspect
from typing import Any

from starlette.requests import Request

from graphql_handler.core.handler import RequestHandler


def get_handler(request: Request) -> RequestHandler:
    """Return the ``RequestHandler`` that ``create_app`` attached to the application."""
    handler: RequestHandler = request.app.state.graphql_handler
    return handler


async def get_local_context(request: Request) -> Any:
    """Per-request context from the app's ``context_getter``, or ``None`` when unset."""
    getter = getattr(request.app.state, "context_getter", None)
    if getter is None:
        return None
    value = getter(request)
    if inspect.isawaitable(value):
        value = await value
    return value
