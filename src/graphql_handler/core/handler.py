"""Request handlers binding a GraphQL schema to HTTP semantics.

``create_request_handler`` builds the lean variant, which skips validation unless a
``validate_fn`` is given. ``create_validating_request_handler`` validates with
graphql-core's specified rules followed by any custom rules.
"""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import Any

from graphql import GraphQLSchema, specified_rules, validate
from graphql.validation import ASTValidationRule

from graphql_handler.core.orchestrator import check_method, run_operation
from graphql_handler.core.params import resolve_params
from graphql_handler.core.ports.request import IncomingRequest
from graphql_handler.core.responses import format_failure, format_outcome, preflight_response
from graphql_handler.models import (
    HandlerConfig,
    HandlerResponse,
    Outcome,
    TypedFailure,
    format_graphql_error,
)

logger = logging.getLogger(__name__)


class RequestHandler:
    """Serve GraphQL requests for one schema. Safe to share across concurrent requests."""

    def __init__(self, schema: GraphQLSchema, config: HandlerConfig) -> None:
        self._schema = schema
        self._config = config
        self._base_headers = dict(config.base_headers)

    @property
    def schema(self) -> GraphQLSchema:
        return self._schema

    @property
    def config(self) -> HandlerConfig:
        return self._config

    async def __call__(self, request: IncomingRequest, local_context: Any = None) -> HandlerResponse:
        config = self._config
        preflight = preflight_response(request.method, config.allow_origins)
        if preflight is not None:
            return preflight

        try:
            outcome = await self._process(request, local_context)
        except Exception as exc:
            logger.exception("Unhandled error while processing GraphQL request")
            outcome = TypedFailure.of(500, exc)
        if isinstance(outcome, TypedFailure):
            logger.debug(
                "GraphQL request failed with status %d: %s",
                outcome.status,
                outcome.errors[0].message if outcome.errors else "",
            )
        try:
            return format_outcome(outcome, config.pretty, self._base_headers, config.format_error_fn)
        except Exception as exc:
            logger.exception("Error formatter raised")
            return format_failure(
                TypedFailure.of(500, exc), config.pretty, self._base_headers, format_graphql_error
            )

    async def _process(self, request: IncomingRequest, local_context: Any) -> Outcome:
        failure = check_method(request.method)
        if failure is not None:
            return failure
        params = await resolve_params(request)
        if isinstance(params, TypedFailure):
            return params
        return await run_operation(
            self._schema,
            params,
            self._config,
            request.method,
            request=request,
            local_context=local_context,
        )


def create_request_handler(schema: GraphQLSchema, **options: Any) -> RequestHandler:
    """Build a handler from keyword options; see ``HandlerConfig`` for the accepted names."""
    return RequestHandler(schema, HandlerConfig(**options))


def create_validating_request_handler(
    schema: GraphQLSchema,
    validation_rules: Collection[type[ASTValidationRule]] = (),
    validate_fn: Any = validate,
    **options: Any,
) -> RequestHandler:
    return create_request_handler(
        schema,
        validation_rules=(*specified_rules, *validation_rules),
        validate_fn=validate_fn if validate_fn is not None else validate,
        **options,
    )
