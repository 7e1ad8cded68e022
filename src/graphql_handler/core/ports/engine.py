from __future__ import annotations

from collections.abc import Awaitable, Collection, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol

from graphql import DocumentNode, ExecutionResult, GraphQLError, GraphQLSchema
from graphql.validation import ASTValidationRule

if TYPE_CHECKING:
    from graphql_handler.models import ExtensionsInfo


class Parser(Protocol):
    def __call__(self, source: str) -> DocumentNode: ...


class Validator(Protocol):
    def __call__(
        self,
        schema: GraphQLSchema,
        document_ast: DocumentNode,
        rules: Collection[type[ASTValidationRule]],
    ) -> Sequence[GraphQLError]: ...


class Executor(Protocol):
    def __call__(
        self,
        schema: GraphQLSchema,
        document: DocumentNode,
        *,
        root_value: Any = None,
        context_value: Any = None,
        variable_values: dict[str, Any] | None = None,
        operation_name: str | None = None,
        field_resolver: Any = None,
        type_resolver: Any = None,
    ) -> ExecutionResult | Mapping[str, Any] | Awaitable[ExecutionResult | Mapping[str, Any]]: ...


class ErrorFormatter(Protocol):
    def __call__(self, error: GraphQLError) -> Any: ...


class ExtensionsFn(Protocol):
    def __call__(self, info: ExtensionsInfo) -> Any: ...
