"""CLI commands that generate labels from a diff."""

from pathlib import Path
from typing import Optional

import typer

from autoforge.engine import analyze_diff, generate_branch_name, generate_commit_message
from autoforge.git import GitError, commit_with_message, create_branch, get_branch
from autoforge.log import configure_logging
from autoforge.cli.utils import confirm, get_effective_engine_config, load_diff

DIFF_FILE_OPTION = typer.Option(
    None,
    "--diff-file",
    "-f",
    help="Read the diff from a file ('-' for stdin) instead of the staged changes",
)
MAX_DIFF_CHARS_OPTION = typer.Option(
    50000,
    "--max-diff-chars",
    help="Maximum characters of staged diff to analyze",
)
VERBOSE_OPTION = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Log analysis details to stderr",
)


def commit_command(
    diff_file: Optional[Path] = DIFF_FILE_OPTION,
    max_diff_chars: int = MAX_DIFF_CHARS_OPTION,
    apply: bool = typer.Option(
        False,
        "--apply",
        "-a",
        help="Commit the staged changes with the generated message",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Bypass confirmation prompt",
    ),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Generate a conventional commit message for the staged changes."""
    configure_logging(verbose)

    try:
        config = get_effective_engine_config()
        diff = load_diff(diff_file, max_diff_chars)
        message = generate_commit_message(diff, config)
        typer.echo(message)

        if not apply:
            return

        if not yes and not confirm("Commit with this message?"):
            typer.echo("Commit cancelled.", err=True)
            raise typer.Exit(0)

        output = commit_with_message(message)
        typer.echo("Commit successful!", err=True)
        if output:
            typer.echo(output)

    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def branch_command(
    diff_file: Optional[Path] = DIFF_FILE_OPTION,
    max_diff_chars: int = MAX_DIFF_CHARS_OPTION,
    create: bool = typer.Option(
        False,
        "--create",
        "-c",
        help="Create and switch to the generated branch",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Bypass confirmation prompt",
    ),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Generate a branch name for the staged changes."""
    configure_logging(verbose)

    try:
        config = get_effective_engine_config()
        diff = load_diff(diff_file, max_diff_chars)
        name = generate_branch_name(diff, config)
        typer.echo(name)

        if not create:
            return

        current = get_branch()
        if not yes and not confirm(f"Create branch {name} from {current}?"):
            typer.echo("Branch creation cancelled.", err=True)
            raise typer.Exit(0)

        create_branch(name)
        typer.echo(f"Switched from {current} to new branch {name}", err=True)

    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def signals_command(
    diff_file: Optional[Path] = DIFF_FILE_OPTION,
    max_diff_chars: int = MAX_DIFF_CHARS_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show what the analyzer sees in the diff."""
    configure_logging(verbose)

    try:
        config = get_effective_engine_config()
        diff = load_diff(diff_file, max_diff_chars)
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    analysis = analyze_diff(diff, config)
    ctx = analysis.context

    typer.echo("[FILES]")
    if ctx.file_names:
        for name in ctx.file_names:
            typer.echo(f"  {name}")
    else:
        typer.echo("  (no files)")
    typer.echo(f"  +{len(ctx.added_lines)} -{len(ctx.removed_lines)}")
    typer.echo()

    typer.echo("[SIGNALS]")
    if analysis.signals:
        for signal in analysis.signals:
            subjects = ", ".join(signal.subjects)
            typer.echo(f"  {signal.score:>2}  {signal.kind.value:<15} {signal.verb.value} {subjects}")
    else:
        typer.echo("  (no signals)")
    typer.echo()

    typer.echo(f"[TYPE]  {analysis.commit_type}")
    typer.echo(f"[SCOPE] {analysis.scope.scope} ({analysis.scope.strategy_used.value}: {analysis.scope.reason})")
