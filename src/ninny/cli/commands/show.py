from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ninny.cli.ui import get_ui, render_document
from ninny.cli.utils.files import read_document
from ninny.cli.utils.settings import load_cli_config
from ninny.core.config import OutputFormat


def show_cmd(
    path: Path = typer.Argument(..., help="INI file to parse.", dir_okay=False),
    fmt: Optional[OutputFormat] = typer.Option(
        None, "--format", "-f", help="Output format."
    ),
    indent: Optional[int] = typer.Option(
        None, "--indent", help="Indentation for plain/json/yaml output."
    ),
    sort_keys: Optional[bool] = typer.Option(
        None, "--sort-keys/--no-sort-keys", help="Sort keys (overrides config if set)."
    ),
    show_types: Optional[bool] = typer.Option(
        None, "--types/--no-types", help="Tag leaves with their item kind (tree view)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output."),
) -> None:
    """Parse a file and print the resulting tree."""
    ui = get_ui(verbose=verbose)

    loaded = load_cli_config(
        ui,
        start_dir=path.resolve().parent,
        cli_overrides={
            "render": {"format": fmt.value if fmt else None, "indent": indent, "sort_keys": sort_keys},
            "ui": {"show_types": show_types},
        },
    )

    doc = read_document(ui, path)
    render_document(ui.console, doc, render=loaded.render, ui=loaded.ui, title=str(path))
