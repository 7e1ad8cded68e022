"""Run a resolved request through parse, validate, execute and extensions.

Each step either hands its result to the next or stops the run with a
``TypedFailure`` carrying the HTTP status for that kind of problem.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import Any

from graphql import DocumentNode, ExecutionResult, GraphQLSchema, OperationType, get_operation_ast

from graphql_handler.models import (
    ExecutionOutcome,
    ExtensionsInfo,
    HandlerConfig,
    Outcome,
    ParsedParams,
    TypedFailure,
)

logger = logging.getLogger(__name__)

ALLOWED_METHODS = "OPTIONS, GET, POST"


def check_method(method: str) -> TypedFailure | None:
    if method in ("GET", "POST"):
        return None
    return TypedFailure.of(
        405,
        "GraphQL only supports GET and POST requests.",
        headers={"Allow": ALLOWED_METHODS},
    )


def _is_mutation_over_get(document: Any, operation_name: str | None) -> bool:
    """Whether the operation that would run is not a query. Looks at document structure only."""
    if not isinstance(document, DocumentNode):
        return False
    operation = get_operation_ast(document, operation_name)
    return operation is not None and operation.operation != OperationType.QUERY


async def _resolve(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


def _as_execution_result(value: Any) -> ExecutionResult:
    if isinstance(value, ExecutionResult):
        return value
    if isinstance(value, Mapping):
        return ExecutionResult(
            data=value.get("data"),
            errors=value.get("errors"),
            extensions=value.get("extensions"),
        )
    raise TypeError(f"Execution must return an ExecutionResult, got {type(value).__name__}.")


def select_context(local_context: Any, config_context: Any, request: Any) -> Any:
    """Per-call context wins over configured context, which wins over the request itself."""
    if local_context is not None:
        return local_context
    if config_context is not None:
        return config_context
    return request


async def run_operation(
    schema: GraphQLSchema,
    params: ParsedParams,
    config: HandlerConfig,
    method: str,
    request: Any = None,
    local_context: Any = None,
) -> Outcome:
    failure = check_method(method)
    if failure is not None:
        return failure

    if not params.query:
        return TypedFailure.of(400, "Must provide query string.")

    try:
        document = config.parse_fn(params.query)
    except Exception as exc:
        return TypedFailure.of(400, exc)

    if method == "GET" and _is_mutation_over_get(document, params.operation_name):
        return TypedFailure.of(
            405,
            "Can only perform a mutation operation from a POST request.",
            headers={"Allow": "POST"},
        )

    if config.validate_fn is not None:
        try:
            validation_errors = config.validate_fn(schema, document, config.validation_rules)
        except Exception as exc:
            logger.exception("Validation strategy raised")
            return TypedFailure.of(500, exc)
        if validation_errors:
            return TypedFailure.of(400, list(validation_errors))

    try:
        result = _as_execution_result(
            await _resolve(
                config.execute_fn(
                    schema=schema,
                    document=document,
                    root_value=config.root_value,
                    context_value=select_context(local_context, config.context, request),
                    variable_values=params.variables,
                    operation_name=params.operation_name,
                    field_resolver=config.field_resolver,
                    type_resolver=config.type_resolver,
                )
            )
        )
    except Exception as exc:
        logger.exception("Execution strategy raised")
        return TypedFailure.of(500, exc)

    extensions: dict[str, Any] | None = None
    if config.extensions is not None:
        info = ExtensionsInfo(
            document=document,
            variables=params.variables,
            operation_name=params.operation_name,
            result=result,
            context=config.context,
        )
        try:
            value = await _resolve(config.extensions(info))
        except Exception as exc:
            logger.exception("Extensions callable raised")
            return TypedFailure.of(500, exc)
        if isinstance(value, Mapping):
            extensions = dict(value)

    return ExecutionOutcome(result=result, extensions=extensions)
