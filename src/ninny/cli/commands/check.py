from __future__ import annotations

from pathlib import Path
from typing import List

import typer
from rich.markup import escape

from ninny.api import load_path
from ninny.cli.ui import get_ui, render_parse_error
from ninny.core.errors import ExitCode, ParseError


def check_cmd(
    paths: List[Path] = typer.Argument(..., help="One or more INI files to validate."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output."),
) -> None:
    """Parse each file and report the first error in each (if any)."""
    ui = get_ui(verbose=verbose)
    console = ui.console

    parse_failed = False
    read_failed = False

    for p in paths:
        try:
            doc = load_path(p)
        except ParseError as e:
            parse_failed = True
            render_parse_error(ui.err_console, e, verbose=ui.verbose)
            continue
        except (OSError, UnicodeDecodeError) as e:
            read_failed = True
            ui.err_console.print(f"[err]Cannot read {escape(str(p))}:[/err] {escape(str(e))}", highlight=False)
            continue

        line = f"[ok]OK[/ok] [path]{escape(str(p))}[/path]"
        if ui.verbose:
            line += f" [muted]({len(doc)} top-level entries)[/muted]"
        console.print(line, highlight=False)

    if read_failed:
        raise typer.Exit(code=int(ExitCode.ERROR))
    if parse_failed:
        raise typer.Exit(code=int(ExitCode.PARSE_ERROR))
