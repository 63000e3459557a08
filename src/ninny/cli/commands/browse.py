from __future__ import annotations

from pathlib import Path

import typer

from ninny.cli.ui import get_ui, run_browser
from ninny.cli.utils.files import read_document
from ninny.cli.utils.settings import load_cli_config


def browse_cmd(
    path: Path = typer.Argument(..., help="INI file to browse.", dir_okay=False),
) -> None:
    """Open an interactive tree view of a parsed file."""
    ui = get_ui()
    loaded = load_cli_config(ui, start_dir=path.resolve().parent)
    doc = read_document(ui, path)
    run_browser(title=str(path), document=doc, ui_config=loaded.ui)
