"""Shared fixtures and helpers for tests."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pytest
from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLObjectType,
    GraphQLResolveInfo,
    GraphQLSchema,
    GraphQLString,
)
from starlette.requests import Request

from graphql_handler import RequestHandler, create_request_handler
from graphql_handler.api.requests import build_request

_REPO_ROOT = Path(__file__).parent.parent

JSON_HEADERS = {"Content-Type": "application/json"}


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Test schema
# ---------------------------------------------------------------------------


def _hello(_root: Any, _info: GraphQLResolveInfo, who: str | None = None) -> str:
    return "Hello " + (who if who is not None else "World")


def _throw(_root: Any, _info: GraphQLResolveInfo) -> str:
    raise Exception("Throws!")


QUERY_ROOT = GraphQLObjectType(
    name="QueryRoot",
    fields={
        "test": GraphQLField(GraphQLString, args={"who": GraphQLArgument(GraphQLString)}, resolve=_hello),
        "thrower": GraphQLField(GraphQLString, resolve=_throw),
    },
)

TEST_SCHEMA = GraphQLSchema(
    query=QUERY_ROOT,
    mutation=GraphQLObjectType(
        name="MutationRoot",
        fields={"writeTest": GraphQLField(QUERY_ROOT, resolve=lambda _root, _info: {})},
    ),
)


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------


def get(url_params: Mapping[str, str] | None = None, headers: Mapping[str, str] | None = None) -> Request:
    return build_request("GET", url_params, headers=headers)


def post_json(payload: Any, url_params: Mapping[str, str] | None = None) -> Request:
    return build_request("POST", url_params, body=json.dumps(payload), headers=JSON_HEADERS)


def post(body: str, content_type: str | None, url_params: Mapping[str, str] | None = None) -> Request:
    headers = {"Content-Type": content_type} if content_type else {}
    return build_request("POST", url_params, body=body, headers=headers)


@pytest.fixture
def schema() -> GraphQLSchema:
    return TEST_SCHEMA


@pytest.fixture
def handler() -> RequestHandler:
    return create_request_handler(TEST_SCHEMA)
