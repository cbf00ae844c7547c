"""Repository configuration management for autoforge.

Handles reading and writing the .autoforge/config.yaml file in each repository.
The file holds the diff ignore list and optional overrides for the engine
(scope domains, branch stop words, limits).
"""

from pathlib import Path

import yaml

from autoforge.log import get_logger

logger = get_logger(__name__)

CONFIG_DIR_NAME = ".autoforge"


class ConfigError(Exception):
    """Raised when the repository configuration cannot be written."""

    pass


# Default configuration values
DEFAULT_CONFIG = {
    "ignore": [
        # Lock files (auto-generated dependency files)
        "poetry.lock",
        "package-lock.json",
        "yarn.lock",
        "pnpm-lock.yaml",
        "Cargo.lock",
        "Gemfile.lock",
        "composer.lock",
        "go.sum",
        # Build artifacts
        "*.min.js",
        "*.min.css",
        "*.map",
        # Binary and generated files
        "*.pyc",
        "*.pyo",
        "*.so",
        "*.dll",
        "*.exe",
        # IDE and editor files
        ".idea/*",
        ".vscode/*",
        "*.swp",
        "*.swo",
    ],
}


def get_config_dir(repo_root: Path) -> Path:
    """Get the repository config directory.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .autoforge/
    """
    return repo_root / CONFIG_DIR_NAME


def get_config_file(repo_root: Path) -> Path:
    """Return path to the config.yaml file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .autoforge/config.yaml
    """
    return get_config_dir(repo_root) / "config.yaml"


def _default_config() -> dict:
    return {key: list(value) for key, value in DEFAULT_CONFIG.items()}


def load_config(repo_root: Path) -> dict:
    """Load the autoforge configuration from config.yaml.

    A missing or unreadable file yields the defaults; the file is never
    created on read.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Configuration dictionary.
    """
    config_file = get_config_file(repo_root)

    if not config_file.exists():
        return _default_config()

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_file, e)
        return _default_config()

    if not isinstance(config, dict):
        logger.warning("Ignoring malformed config %s", config_file)
        return _default_config()

    # Merge with defaults for any missing keys
    for key, value in _default_config().items():
        if key not in config:
            config[key] = value
    return config


def save_config(repo_root: Path, config: dict) -> None:
    """Save the configuration to config.yaml.

    Args:
        repo_root: The root directory of the git repository.
        config: Configuration dictionary to save.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_file = get_config_file(repo_root)

    try:
        config_file.parent.mkdir(exist_ok=True)
        with open(config_file, "w") as f:
            yaml.dump(
                config,
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
    except OSError as e:
        raise ConfigError(f"Failed to save config to {config_file}: {e}")


def get_ignore_patterns(repo_root: Path) -> list[str]:
    """Get the list of ignore patterns from config.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        List of file patterns to ignore in diffs.
    """
    config = load_config(repo_root)
    return config.get("ignore") or []


def add_ignore_pattern(repo_root: Path, pattern: str) -> None:
    """Add a pattern to the ignore list.

    Args:
        repo_root: The root directory of the git repository.
        pattern: File pattern to add (e.g., "*.log", "build/*").
    """
    config = load_config(repo_root)
    if not config.get("ignore"):
        config["ignore"] = []
    if pattern not in config["ignore"]:
        config["ignore"].append(pattern)
        save_config(repo_root, config)


def remove_ignore_pattern(repo_root: Path, pattern: str) -> bool:
    """Remove a pattern from the ignore list.

    Args:
        repo_root: The root directory of the git repository.
        pattern: File pattern to remove.

    Returns:
        True if pattern was found and removed, False otherwise.
    """
    config = load_config(repo_root)
    if config.get("ignore") and pattern in config["ignore"]:
        config["ignore"].remove(pattern)
        save_config(repo_root, config)
        return True
    return False
