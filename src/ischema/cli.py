"""Command-line utilities for the ischema package."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import get_version
from .api import build as build_project
from .api import parse_file
from .compiler import compile_all
from .config import IschemaConfig, find_config, init_config, load_config
from .errors import IschemaError, SchemaRejectedError
from .model import Interface, Nested

app = typer.Typer(help="Compile /* SCHEMA */ interface blocks into JSON Schema files")
console = Console()


@app.callback()
def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def version() -> None:
    """Print the installed package version."""
    typer.echo(get_version())


@app.command()
def build(
    root: Annotated[Path, typer.Argument(file_okay=False)] = Path("."),
    validate: Annotated[
        bool, typer.Option(help="Validate each schema against draft-07 before writing.")
    ] = True,
) -> None:
    """Compile every marked declaration under ROOT."""
    if not root.is_dir():
        raise typer.BadParameter(f"{root} is not a directory")
    try:
        report = build_project(root, validate=validate)
    except SchemaRejectedError as exc:
        console.print(f"[bold red]Invalid schema:[/] {escape(exc.title)}")
        if exc.reason:
            console.print(escape(exc.reason))
        raise typer.Exit(code=1) from exc
    except IschemaError as exc:
        console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    summary = report.summary()
    console.print(
        f"[bold green]Schemas written:[/] {summary['schemas']} from {summary['files']} file(s)"
    )


@app.command()
def init(
    root: Annotated[Path, typer.Argument(file_okay=False)] = Path("."),
    force: Annotated[bool, typer.Option(help="Overwrite an existing config file.")] = False,
) -> None:
    """Write a default ischema.json into ROOT."""
    if not root.is_dir():
        raise typer.BadParameter(f"{root} is not a directory")
    existing = find_config(root)
    if existing is not None and not force:
        console.print(f"[bold yellow]Config already exists:[/] {existing} (use --force)")
        raise typer.Exit(code=1)
    path = init_config(root)
    console.print(f"[bold green]Config written:[/] {path}")


@app.command("config-schema")
def config_schema(
    out: Annotated[Path, typer.Argument(help="Output path (usually .json).")],
    pretty: Annotated[bool, typer.Option(help="Write pretty-printed JSON.")] = True,
) -> None:
    """Export the JSON Schema of the ischema.json config file."""
    schema = IschemaConfig.model_json_schema(by_alias=True)
    out.write_text(json.dumps(schema, indent="\t" if pretty else None, sort_keys=False))
    console.print(f"[bold green]Config schema written:[/] {escape(str(out))}")


def _count_props(inter: Interface) -> tuple[int, int]:
    leaves = sum(1 for v in inter.props.values() if not isinstance(v, Nested))
    return leaves, len(inter.props) - leaves


@app.command()
def inspect(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True)],
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the compiled schemas instead of a table.")
    ] = False,
) -> None:
    """Show the declarations found in a single file."""
    try:
        config = load_config(path.parent)
    except IschemaError as exc:
        console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    interfaces = parse_file(path, config.markers)
    if as_json:
        schemas = compile_all(interfaces, config.index_encoding)
        typer.echo(json.dumps(schemas, indent="\t"))
        return
    if not interfaces:
        console.print(f"No schema blocks in {path}")
        return
    table = Table(title=f"Declarations ({path.name})")
    table.add_column("Name")
    table.add_column("Props")
    table.add_column("Objects")
    table.add_column("Depth")
    table.add_column("Index signatures")
    for inter in interfaces:
        leaves, objects = _count_props(inter)
        table.add_row(
            inter.name,
            str(leaves),
            str(objects),
            str(inter.depth()),
            ", ".join(f"{e.key} -> {e.value.to_dict()}" for e in inter.indices) or "-",
        )
    console.print(table)


def main() -> None:
    """Entry point for `python -m ischema.cli`."""
    app()


if __name__ == "__main__":
    main()
