"""CLI entry point for autoforge.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from autoforge.cli.generate import branch_command, commit_command, signals_command
from autoforge.cli.ignore import ignore_app
from autoforge.cli.init import init_config
from autoforge.cli.main import main_command

# Main application
app = typer.Typer(
    name="autoforge",
    help="autoforge: offline commit message and branch name generator",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(ignore_app, name="ignore")

# Add individual commands
app.command("init")(init_config)
app.command("commit")(commit_command)
app.command("branch")(branch_command)
app.command("signals")(signals_command)

# Set the main callback (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "ignore_app",
    "init_config",
    "commit_command",
    "branch_command",
    "signals_command",
    "main_command",
]
