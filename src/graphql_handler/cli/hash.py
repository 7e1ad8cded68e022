from typing import Annotated

import typer

from graphql_handler.core.hashing import hash_document


def hash_(
    document: Annotated[str, typer.Argument(help="GraphQL document text.")],
) -> None:
    """Print the persisted-query hash (hex SHA-256) of a document."""
    typer.echo(hash_document(document))
