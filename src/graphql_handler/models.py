"""Value objects passed between the stages of the request pipeline.

Every object here is immutable once built. A ``HandlerConfig`` is shared by all
requests served by one handler; everything else lives for a single request.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias

from graphql import ExecutionResult, GraphQLError, execute, parse
from graphql.validation import ASTValidationRule

from graphql_handler.core.ports.engine import (
    ErrorFormatter,
    Executor,
    ExtensionsFn,
    Parser,
    Validator,
)


def format_graphql_error(error: GraphQLError) -> dict[str, Any]:
    """Default error formatter: ``{message, locations, path, extensions}`` as GraphQL responses carry it."""
    return error.formatted  # type: ignore[return-value]


@dataclass(frozen=True)
class ParsedParams:
    query: str | None = None
    variables: dict[str, Any] | None = None
    operation_name: str | None = None


@dataclass(frozen=True)
class HandlerConfig:
    """Per-handler configuration, resolved once when the handler is built."""

    allow_origins: str | None = None
    context: Any = None
    pretty: bool = False
    validation_rules: Collection[type[ASTValidationRule]] = ()
    root_value: Any = None
    field_resolver: Callable[..., Any] | None = None
    type_resolver: Callable[..., Any] | None = None
    extensions: ExtensionsFn | None = None
    execute_fn: Executor = execute  # type: ignore[assignment]
    parse_fn: Parser = parse  # type: ignore[assignment]
    format_error_fn: ErrorFormatter = format_graphql_error
    validate_fn: Validator | None = None

    def __post_init__(self) -> None:
        # Own a private copy of the rule set so later changes to the caller's list are invisible.
        object.__setattr__(self, "validation_rules", tuple(self.validation_rules or ()))
        if self.execute_fn is None:
            object.__setattr__(self, "execute_fn", execute)
        if self.parse_fn is None:
            object.__setattr__(self, "parse_fn", parse)
        if self.format_error_fn is None:
            object.__setattr__(self, "format_error_fn", format_graphql_error)

    @property
    def base_headers(self) -> Mapping[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.allow_origins:
            headers["Access-Control-Allow-Origin"] = self.allow_origins
        return MappingProxyType(headers)


def _as_graphql_error(item: Any) -> GraphQLError:
    if isinstance(item, GraphQLError):
        return item
    if isinstance(item, BaseException):
        return GraphQLError(str(item), original_error=item if isinstance(item, Exception) else None)
    return GraphQLError(str(item))


@dataclass(frozen=True)
class TypedFailure:
    """An early exit from the pipeline, carrying its HTTP status and extra headers."""

    status: int
    errors: tuple[GraphQLError, ...]
    headers: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def of(cls, status: int, payload: Any, headers: Mapping[str, str] | None = None) -> TypedFailure:
        """Build a failure from a message, an exception, an error, or a sequence of those."""
        items = payload if isinstance(payload, list | tuple) else [payload]
        return cls(
            status=status,
            errors=tuple(_as_graphql_error(item) for item in items),
            headers=MappingProxyType(dict(headers or {})),
        )


@dataclass(frozen=True)
class ExecutionOutcome:
    """A completed execution plus the (optional) extensions computed for it."""

    result: ExecutionResult
    extensions: dict[str, Any] | None = None


Outcome: TypeAlias = ExecutionOutcome | TypedFailure


@dataclass(frozen=True)
class ExtensionsInfo:
    """Argument handed to the ``extensions`` callable after a successful execution."""

    document: Any
    variables: dict[str, Any] | None
    operation_name: str | None
    result: ExecutionResult
    context: Any


@dataclass(frozen=True)
class HandlerResponse:
    status: int
    headers: dict[str, str]
    body: str
