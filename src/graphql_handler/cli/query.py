import asyncio
import json
from typing import Annotated

import typer
from rich.console import Console
from rich.syntax import Syntax

from graphql_handler.api.requests import build_request
from graphql_handler.cli.schema import DEFAULT_SCHEMA, load_schema
from graphql_handler.core.handler import create_validating_request_handler
from graphql_handler.models import HandlerResponse

console = Console()


def _run(
    document: str,
    schema_target: str,
    variables: str | None,
    operation_name: str | None,
    method: str,
    pretty: bool,
) -> HandlerResponse:
    handler = create_validating_request_handler(load_schema(schema_target), pretty=pretty)
    if method == "GET":
        url_params = {"query": document}
        if variables:
            url_params["variables"] = variables
        if operation_name:
            url_params["operationName"] = operation_name
        request = build_request("GET", url_params)
    else:
        body = {"query": document, "variables": variables, "operationName": operation_name}
        request = build_request(
            method,
            body=json.dumps({k: v for k, v in body.items() if v is not None}),
            headers={"Content-Type": "application/json"},
        )
    return asyncio.run(handler(request))


def query(
    document: Annotated[str, typer.Argument(help="GraphQL document text.")],
    schema: Annotated[
        str, typer.Option(help="Schema as 'module:attribute' or an SDL file.", envvar="GRAPHQL_HANDLER_SCHEMA")
    ] = DEFAULT_SCHEMA,
    variables: Annotated[str | None, typer.Option(help="Variables as a JSON object.")] = None,
    operation_name: Annotated[str | None, typer.Option(help="Operation to run.")] = None,
    method: Annotated[str, typer.Option(help="HTTP method to simulate.")] = "POST",
    pretty: Annotated[bool, typer.Option(help="Indent the JSON output.")] = True,
) -> None:
    """Run one request through the handler in-process and print the response."""
    response = _run(document, schema, variables, operation_name, method.upper(), pretty)
    style = "green" if response.status == 200 else "red"
    console.print(f"[{style}]HTTP {response.status}[/{style}]")
    console.print(Syntax(response.body, "json", theme="ansi_dark", word_wrap=True))
    if response.status != 200:
        raise typer.Exit(code=1)
