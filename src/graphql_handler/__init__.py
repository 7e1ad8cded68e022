from graphql_handler.core.handler import (
    RequestHandler,
    create_request_handler,
    create_validating_request_handler,
)
from graphql_handler.core.hashing import hash_document
from graphql_handler.models import (
    ExecutionOutcome,
    ExtensionsInfo,
    HandlerConfig,
    HandlerResponse,
    ParsedParams,
    TypedFailure,
    format_graphql_error,
)

__all__ = [
    "ExecutionOutcome",
    "ExtensionsInfo",
    "HandlerConfig",
    "HandlerResponse",
    "ParsedParams",
    "RequestHandler",
    "TypedFailure",
    "create_request_handler",
    "create_validating_request_handler",
    "format_graphql_error",
    "hash_document",
]
