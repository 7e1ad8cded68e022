import typer

from graphql_handler.cli.hash import hash_
from graphql_handler.cli.query import query
from graphql_handler.cli.serve import serve

app = typer.Typer(
    name="graphql-handler",
    help="graphql-handler CLI: serve and exercise a GraphQL schema over HTTP.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("serve")(serve)
app.command("query")(query)
app.command("hash")(hash_)


def main() -> None:
    app()
