from typing import Annotated

import typer
from rich.console import Console

from graphql_handler.cli.schema import DEFAULT_SCHEMA, load_schema

console = Console()


def serve(
    schema: Annotated[
        str, typer.Option(help="Schema as 'module:attribute' or an SDL file.", envvar="GRAPHQL_HANDLER_SCHEMA")
    ] = DEFAULT_SCHEMA,
    host: Annotated[str, typer.Option(envvar="GRAPHQL_HANDLER_HOST")] = "127.0.0.1",
    port: Annotated[int, typer.Option(envvar="GRAPHQL_HANDLER_PORT")] = 8000,
    path: Annotated[str, typer.Option(help="URL path of the endpoint.", envvar="GRAPHQL_HANDLER_PATH")] = "/graphql",
    allow_origins: Annotated[
        str | None,
        typer.Option(help="Value for Access-Control-Allow-Origin; enables CORS.", envvar="GRAPHQL_HANDLER_ALLOW_ORIGINS"),
    ] = "*",
    pretty: Annotated[bool, typer.Option(help="Indent JSON responses.")] = False,
    validate: Annotated[bool, typer.Option(help="Validate documents before executing them.")] = True,
    log_level: Annotated[str, typer.Option(help="Log level passed to uvicorn.")] = "info",
) -> None:
    """Start the GraphQL HTTP server."""
    import uvicorn

    from graphql_handler.api.app import create_app

    app = create_app(
        load_schema(schema),
        path=path,
        validate=validate,
        allow_origins=allow_origins or None,
        pretty=pretty,
    )
    console.print(f"[green]Serving GraphQL on http://{host}:{port}{path}[/green]")
    uvicorn.run(app, host=host, port=port, log_level=log_level)
