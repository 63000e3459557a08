from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ninny.api import loads
from ninny.cli.ui import get_ui, render_document
from ninny.cli.utils.settings import load_cli_config
from ninny.core.config import OutputFormat

SAMPLE_INI = r"""
toplevel = hello
other = world

; Amazing!
# [Wow]

[goodbye] # nother inline comment
# Wow, that's also a comment
cruel = intentions
world = Captain Planet! ; This is a comment
"  hello  " = "mismatched'
"""


def demo_cmd(
    fmt: Optional[OutputFormat] = typer.Option(
        None, "--format", "-f", help="Output format."
    ),
    source: bool = typer.Option(False, "--source", help="Print the sample text first."),
) -> None:
    """Parse and print a built-in sample document."""
    ui = get_ui()
    loaded = load_cli_config(
        ui, start_dir=Path.cwd(), cli_overrides={"render": {"format": fmt.value if fmt else None}}
    )

    if source:
        ui.console.print(SAMPLE_INI.strip("\n"), markup=False, highlight=False)
        ui.console.print()

    render_document(ui.console, loads(SAMPLE_INI), render=loaded.render, ui=loaded.ui, title="sample")
