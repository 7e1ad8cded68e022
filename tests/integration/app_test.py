"""HTTP-level tests against the FastAPI application."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient
from graphql import GraphQLField, GraphQLObjectType, GraphQLSchema, GraphQLString
from starlette.requests import Request

from graphql_handler.api.app import create_app
from tests.conftest import TEST_SCHEMA


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(TEST_SCHEMA, allow_origins="*"))


class TestHealthRoutes:
    def test_health(self, client: TestClient) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_liveness(self, client: TestClient) -> None:
        resp = client.get("/healthz/live")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestGraphQLRoute:
    def test_get(self, client: TestClient) -> None:
        resp = client.get("/graphql", params={"query": "{test}"})
        assert resp.status_code == 200
        assert resp.text == '{"data":{"test":"Hello World"}}'
        assert resp.headers["content-type"] == "application/json"
        assert resp.headers["access-control-allow-origin"] == "*"

    def test_post_json(self, client: TestClient) -> None:
        resp = client.post("/graphql", json={"query": "{test}"})
        assert resp.status_code == 200
        assert resp.text == '{"data":{"test":"Hello World"}}'

    def test_post_form(self, client: TestClient) -> None:
        resp = client.post("/graphql", data={"query": "{test}"})
        assert resp.json() == {"data": {"test": "Hello World"}}

    def test_post_graphql_body(self, client: TestClient) -> None:
        resp = client.post(
            "/graphql",
            content='{ test(who: "Dolly") }',
            headers={"Content-Type": "application/graphql"},
        )
        assert resp.json() == {"data": {"test": "Hello Dolly"}}

    def test_get_mutation(self, client: TestClient) -> None:
        resp = client.get("/graphql", params={"query": "mutation TestMutation { writeTest { test } }"})
        assert resp.status_code == 405
        assert resp.headers["allow"] == "POST"

    def test_put(self, client: TestClient) -> None:
        resp = client.put("/graphql", params={"query": "{test}"})
        assert resp.status_code == 405
        assert resp.headers["allow"] == "OPTIONS, GET, POST"
        assert resp.json() == {"errors": [{"message": "GraphQL only supports GET and POST requests."}]}

    @pytest.mark.parametrize("method", ["HEAD", "TRACE", "DELETE", "PATCH"])
    def test_other_verbs_reach_the_handler(self, client: TestClient, method: str) -> None:
        resp = client.request(method, "/graphql", params={"query": "{test}"})
        assert resp.status_code == 405
        assert resp.headers["allow"] == "OPTIONS, GET, POST"
        assert resp.headers["content-type"] == "application/json"

    def test_trace_gets_the_graphql_envelope(self, client: TestClient) -> None:
        resp = client.request("TRACE", "/graphql")
        assert resp.json() == {"errors": [{"message": "GraphQL only supports GET and POST requests."}]}

    def test_preflight(self, client: TestClient) -> None:
        resp = client.options("/graphql")
        assert resp.status_code == 204
        assert resp.headers["access-control-allow-methods"] == "OPTIONS, GET, POST"
        assert resp.headers["access-control-allow-origin"] == "*"

    def test_validation_on_by_default(self, client: TestClient) -> None:
        resp = client.get("/graphql", params={"query": "{ unknownField }"})
        assert resp.status_code == 400

    def test_validation_can_be_disabled(self) -> None:
        client = TestClient(create_app(TEST_SCHEMA, validate=False))
        resp = client.get("/graphql", params={"query": "{ test, unknownField }"})
        assert resp.status_code == 200
        assert "access-control-allow-origin" not in resp.headers

    def test_custom_path(self) -> None:
        client = TestClient(create_app(TEST_SCHEMA, path="/api/gql"))
        assert client.get("/api/gql", params={"query": "{test}"}).status_code == 200
        assert client.get("/graphql", params={"query": "{test}"}).status_code == 404


def _context_schema() -> GraphQLSchema:
    def resolve(_root: Any, info: Any) -> str:
        context = info.context
        if isinstance(context, Request):
            return "request:" + context.headers.get("x-user", "")
        return str(context)

    return GraphQLSchema(query=GraphQLObjectType("Query", {"who": GraphQLField(GraphQLString, resolve=resolve)}))


class TestContext:
    def test_request_is_default_context(self) -> None:
        client = TestClient(create_app(_context_schema()))
        resp = client.get("/graphql", params={"query": "{ who }"}, headers={"X-User": "ada"})
        assert resp.json() == {"data": {"who": "request:ada"}}

    def test_configured_context(self) -> None:
        client = TestClient(create_app(_context_schema(), context="configured"))
        assert client.get("/graphql", params={"query": "{ who }"}).json() == {"data": {"who": "configured"}}

    def test_context_getter_wins(self) -> None:
        async def context_getter(request: Request) -> str:
            return "getter:" + request.headers.get("x-user", "")

        client = TestClient(create_app(_context_schema(), context="configured", context_getter=context_getter))
        resp = client.get("/graphql", params={"query": "{ who }"}, headers={"X-User": "ada"})
        assert resp.json() == {"data": {"who": "getter:ada"}}
