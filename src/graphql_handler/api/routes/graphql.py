from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from starlette.requests import Request
from starlette.responses import Response

from graphql_handler.api.dependencies import get_handler, get_local_context
from graphql_handler.core.handler import RequestHandler

# The handler itself answers unsupported methods with 405, so every verb is routed to it.
ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


async def graphql_endpoint(
    request: Request,
    handler: RequestHandler = Depends(get_handler),
    local_context: Any = Depends(get_local_context),
) -> Response:
    result = await handler(request, local_context)
    return Response(content=result.body, status_code=result.status, headers=result.headers)


def create_graphql_router(path: str = "/graphql") -> APIRouter:
    router = APIRouter(tags=["graphql"])
    router.add_api_route(path, graphql_endpoint, methods=ROUTED_METHODS, include_in_schema=False)
    return router
