from __future__ import annotations

import typer

from bterr import __version__
from bterr.cli.commands.demo import demo
from bterr.cli.commands.status import status
from bterr.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
)


# Commands
app.command()(status)
app.command()(demo)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=int(ErrorCode.OK))


def main() -> None:
    app()
