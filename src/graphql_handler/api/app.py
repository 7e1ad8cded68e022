from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from fastapi import FastAPI
from graphql import GraphQLSchema

from graphql_handler.api.routes.graphql import create_graphql_router
from graphql_handler.api.routes.health import router as health_router
from graphql_handler.core.handler import create_request_handler, create_validating_request_handler

logger = logging.getLogger(__name__)


def create_app(
    schema: GraphQLSchema,
    *,
    path: str = "/graphql",
    validate: bool = True,
    context_getter: Callable[..., Any] | None = None,
    **options: Any,
) -> FastAPI:
    """Serve ``schema`` at ``path``; ``options`` are passed to the handler factory."""
    app = FastAPI(
        title="GraphQL Handler",
        description="GraphQL over HTTP for an executable graphql-core schema.",
        version="0.1.0",
    )

    factory = create_validating_request_handler if validate else create_request_handler
    app.state.graphql_handler = factory(schema, **options)
    app.state.context_getter = context_getter

    app.include_router(health_router, include_in_schema=False)
    app.include_router(create_graphql_router(path))
    logger.info("GraphQL endpoint mounted at %s (validation %s)", path, "on" if validate else "off")

    return app
