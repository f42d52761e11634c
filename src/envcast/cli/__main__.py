from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer

from ..core.environment import Environment
from ..core.errors import ConfigLoadError, ParseError, SchemaError
from ..core.loader import describe_errors
from ..core.resolver import parse_config
from ..core.types import FIELD_TYPES, Field

app = typer.Typer(help="envcast CLI")


def _env(name: str, config: Optional[Path], sources: Optional[List[str]]) -> Environment:
    return Environment(name, sources=list(sources) if sources else None, config_path=config)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each field as it loads")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def check(
    env: str = typer.Option("development", "--env"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to envcast.yaml"),
    source: Optional[List[str]] = typer.Option(None, "--source", help="Extra source URI, may repeat"),
):
    """Load the declared schema and print the resolved configuration."""
    try:
        e = _env(env, config, source)
        resolved = e.load()
    except SchemaError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)
    except ConfigLoadError as exc:
        for rec in describe_errors(exc):
            typer.echo(
                f"{rec['key']}: source #{rec['source']} ({rec['name']}): {rec['message']}",
                err=True,
            )
        raise typer.Exit(code=1)
    typer.echo(json.dumps(dict(resolved), indent=2))


@app.command()
def get(
    name: str,
    type: str = typer.Option("auto", "--type", help=f"One of: {', '.join(FIELD_TYPES)}"),
    default: Optional[str] = typer.Option(None, "--default"),
    env: str = typer.Option("development", "--env"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to envcast.yaml"),
    source: Optional[List[str]] = typer.Option(None, "--source", help="Source URI, may repeat"),
):
    """Resolve a single variable and print it as JSON."""
    try:
        default_value = None
        if default is not None:
            # the default is typed by the same rules as the variable itself
            default_value = parse_config(Field(name="default", type=type), {"default": default})
        field = Field(name=name, type=type, default_value=default_value)
        e = _env(env, config, source)
        value = e.load({name: field})[name]
    except (SchemaError, ParseError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    except ConfigLoadError as exc:
        for rec in describe_errors(exc):
            typer.echo(f"source #{rec['source']}: {rec['message']}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(value))


@app.command("sources-list")
def sources_list(
    env: str = typer.Option("development", "--env"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to envcast.yaml"),
):
    e = _env(env, config, None)
    typer.echo(json.dumps([
        {
            "id": rs.source.id,
            "name": rs.source.name,
            "filter": rs.filter.include_regex.pattern if rs.filter and rs.filter.include_regex else None,
        }
        for rs in e.registered_sources
    ], indent=2))


if __name__ == "__main__":
    app()
