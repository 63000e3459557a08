from __future__ import annotations

import typer
from rich.console import Console

from ninny import __version__
from ninny.cli.commands.browse import browse_cmd
from ninny.cli.commands.check import check_cmd
from ninny.cli.commands.demo import demo_cmd
from ninny.cli.commands.get import get_cmd
from ninny.cli.commands.init import init_cmd
from ninny.cli.commands.show import show_cmd

app = typer.Typer(
    name="ninny",
    help="Parse INI files with dotted, nested sections and inspect the result.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"ninny {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", callback=_version_callback, is_eager=True
    ),
) -> None:
    pass


app.command("show")(show_cmd)
app.command("check")(check_cmd)
app.command("get")(get_cmd)
app.command("browse")(browse_cmd)
app.command("init")(init_cmd)
app.command("demo")(demo_cmd)


if __name__ == "__main__":  # pragma: no cover
    app()
