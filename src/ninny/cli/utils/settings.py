from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.markup import escape

from ninny.cli.ui import UI
from ninny.core.config import LoadedConfig, load_config
from ninny.core.errors import ConfigError, ExitCode


def load_cli_config(
    ui: UI, start_dir: Path, cli_overrides: Optional[Dict[str, Any]] = None
) -> LoadedConfig:
    try:
        loaded = load_config(start_dir=start_dir, cli_overrides=cli_overrides)
    except ConfigError as e:
        ui.err_console.print(f"[err]Invalid config:[/err] {escape(str(e))}", highlight=False)
        raise typer.Exit(code=int(ExitCode.ERROR))

    if ui.verbose:
        ui.err_console.print("[bold]Config sources:[/bold]")
        ui.err_console.print(f"  global: {loaded.global_path or '-'}")
        ui.err_console.print(f"  repo:   {loaded.repo_path or '-'}")
    return loaded
