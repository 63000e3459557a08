from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.markup import escape

from ninny.cli.ui import get_ui
from ninny.cli.utils.files import read_document
from ninny.core.errors import ExitCode
from ninny.core.models import Array, Section, lookup, to_plain


def get_cmd(
    path: Path = typer.Argument(..., help="INI file to parse.", dir_okay=False),
    key: str = typer.Argument(..., help="Dotted key, e.g. server.http.port"),
) -> None:
    """Print a single value. Sections are printed as JSON."""
    ui = get_ui()
    doc = read_document(ui, path)

    try:
        item = lookup(doc, key.split("."))
    except KeyError:
        ui.err_console.print(f"[err]No such key:[/err] {escape(key)}", highlight=False)
        raise typer.Exit(code=int(ExitCode.ERROR))

    if isinstance(item, Section):
        typer.echo(json.dumps(to_plain(item.entries), indent=2, sort_keys=True, ensure_ascii=False))
    elif isinstance(item, Array):
        typer.echo("\n".join(item.items))
    else:
        typer.echo(item.text)
