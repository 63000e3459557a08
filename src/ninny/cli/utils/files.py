from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape

from ninny.api import load_path
from ninny.cli.ui import UI, render_parse_error
from ninny.core.errors import ExitCode, ParseError
from ninny.core.models import Document


def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def write_file(path: Path, content: str, *, force: bool) -> bool:
    if path.exists() and not force:
        return False
    path.write_text(content, encoding="utf-8")
    return True


def read_document(ui: UI, path: Path) -> Document:
    """Load + parse `path`, turning failures into CLI exits."""
    try:
        return load_path(path)
    except ParseError as e:
        render_parse_error(ui.err_console, e, verbose=ui.verbose)
        raise typer.Exit(code=int(ExitCode.PARSE_ERROR))
    except (OSError, UnicodeDecodeError) as e:
        ui.err_console.print(
            f"[err]Cannot read {escape(str(path))}:[/err] {escape(str(e))}", highlight=False
        )
        raise typer.Exit(code=int(ExitCode.ERROR))
