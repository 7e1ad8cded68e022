"""Resolve ``--schema`` targets: ``package.module:attribute`` or a path to an SDL file."""

from __future__ import annotations

import importlib
from pathlib import Path

import typer
from graphql import GraphQLSchema, build_schema

DEFAULT_SCHEMA = "graphql_handler.demo:schema"
SDL_SUFFIXES = frozenset({".graphql", ".gql"})


def load_schema(target: str) -> GraphQLSchema:
    path = Path(target)
    if path.suffix in SDL_SUFFIXES:
        try:
            return build_schema(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise typer.BadParameter(f"Schema file not found: {target}") from None

    module_name, _, attribute = target.partition(":")
    if not attribute:
        raise typer.BadParameter(f"Expected 'module:attribute' or an SDL file, got {target!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise typer.BadParameter(f"Cannot import {module_name!r}: {exc}") from exc

    schema = getattr(module, attribute, None)
    if not isinstance(schema, GraphQLSchema):
        raise typer.BadParameter(f"{target!r} is not a GraphQLSchema")
    return schema
