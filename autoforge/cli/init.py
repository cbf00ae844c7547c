"""CLI command for initializing the repository configuration."""

import typer

from autoforge.engine import EngineConfig, engine_config_to_dict
from autoforge.git import GitError, get_repo_root
from autoforge.user_config import DEFAULT_CONFIG, ConfigError, get_config_file, save_config


def default_config_dict() -> dict:
    """Return the full default configuration with every engine section."""
    config = {key: list(value) for key, value in DEFAULT_CONFIG.items()}
    config.update(engine_config_to_dict(EngineConfig()))
    return config


def init_config(
    force: bool = typer.Option(
        False,
        "--force",
        help="Overwrite an existing configuration without asking",
    ),
) -> None:
    """Write the default .autoforge/config.yaml for this repository."""
    try:
        repo_root = get_repo_root()
        config_file = get_config_file(repo_root)

        if config_file.exists() and not force:
            overwrite = typer.confirm(
                f"Configuration already exists at {config_file}. Overwrite?",
                default=False,
            )
            if not overwrite:
                typer.echo("Keeping existing configuration.")
                raise typer.Exit(0)

        save_config(repo_root, default_config_dict())
        typer.echo(f"Configuration written to {config_file}")

    except (GitError, ConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
