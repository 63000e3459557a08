from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler

from ninny.cli.ui.formatters import (
    THEME,
    render_document,
    render_json,
    render_parse_error,
    render_plain,
    render_tree,
    render_yaml,
)
from ninny.cli.ui.tui import run_browser


@dataclass(frozen=True)
class UI:
    console: Console
    err_console: Console
    verbose: bool


def setup_logging(verbose: bool, console: Console) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=False)],
        force=True,
    )


def get_ui(*, verbose: bool = False) -> UI:
    console = Console(theme=THEME, emoji=False)
    err_console = Console(theme=THEME, stderr=True, emoji=False)
    setup_logging(verbose, err_console)
    return UI(console=console, err_console=err_console, verbose=verbose)


__all__ = [
    "THEME",
    "UI",
    "get_ui",
    "setup_logging",
    "render_document",
    "render_json",
    "render_parse_error",
    "render_plain",
    "render_tree",
    "render_yaml",
    "run_browser",
]
