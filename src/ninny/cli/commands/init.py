from __future__ import annotations

from pathlib import Path

import typer

from ninny.cli.utils.files import ensure_dir, write_file

DEFAULT_CONFIG_TOML = """\
[render]
# tree | plain | json | yaml
format = "tree"
indent = 4
sort_keys = true

[ui]
# tag leaves with their item kind in tree views
show_types = false
"""


def init_cmd(
    path: Path = typer.Argument(Path("."), help="Directory to initialize."),
    force: bool = typer.Option(False, "--force", help="Overwrite existing files."),
) -> None:
    """Write a default .ninny/config.toml."""
    root = path.resolve()
    cfg_dir = root / ".ninny"
    ensure_dir(cfg_dir)

    target = cfg_dir / "config.toml"
    if write_file(target, DEFAULT_CONFIG_TOML, force=force):
        typer.echo(f"Initialized {target}")
    else:
        typer.echo(f"{target} already exists (use --force to overwrite)")
