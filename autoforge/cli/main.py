"""Root callback of the autoforge CLI."""

from typing import Optional

import typer

from autoforge import __version__


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"autoforge {__version__}")
        raise typer.Exit(0)


def main_command(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate commit messages and branch names from diffs, offline."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
