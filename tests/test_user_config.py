"""Tests for autoforge.user_config module."""

import pytest
import yaml

from autoforge.user_config import (
    DEFAULT_CONFIG,
    ConfigError,
    add_ignore_pattern,
    get_config_file,
    get_ignore_patterns,
    load_config,
    remove_ignore_pattern,
    save_config,
)


class TestGetConfigFile:
    """Tests for get_config_file function."""

    def test_returns_correct_path(self, temp_dir):
        """Test that correct config path is returned."""
        config_file = get_config_file(temp_dir)

        assert config_file.name == "config.yaml"
        assert config_file.parent.name == ".autoforge"

    def test_does_not_create_directory(self, temp_dir):
        """Test that resolving the path has no side effect."""
        config_file = get_config_file(temp_dir)

        assert not config_file.parent.exists()


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults_if_missing(self, temp_dir):
        """Test that defaults are returned without creating a file."""
        config = load_config(temp_dir)

        assert "poetry.lock" in config["ignore"]
        assert not get_config_file(temp_dir).exists()

    def test_defaults_are_copies(self, temp_dir):
        """Test that callers cannot mutate the defaults."""
        load_config(temp_dir)["ignore"].append("mine")

        assert "mine" not in DEFAULT_CONFIG["ignore"]

    def test_loads_existing_config(self, temp_dir):
        """Test loading existing config file."""
        config_file = get_config_file(temp_dir)
        config_file.parent.mkdir(parents=True)
        config_file.write_text(yaml.dump({"ignore": ["custom.lock"], "scope": {"fallback": "misc"}}))

        config = load_config(temp_dir)

        assert config["ignore"] == ["custom.lock"]
        assert config["scope"] == {"fallback": "misc"}

    def test_merges_with_defaults(self, temp_dir):
        """Test that missing keys are filled from defaults."""
        config_file = get_config_file(temp_dir)
        config_file.parent.mkdir(parents=True)
        config_file.write_text(yaml.dump({"branch": {"max_slug_length": 30}}))

        config = load_config(temp_dir)

        assert config["ignore"] == DEFAULT_CONFIG["ignore"]
        assert config["branch"] == {"max_slug_length": 30}

    def test_handles_corrupted_config(self, temp_dir, caplog):
        """Test that invalid yaml falls back to defaults with a warning."""
        config_file = get_config_file(temp_dir)
        config_file.parent.mkdir(parents=True)
        config_file.write_text("ignore: [unclosed")

        with caplog.at_level("WARNING", logger="autoforge"):
            config = load_config(temp_dir)

        assert config["ignore"] == DEFAULT_CONFIG["ignore"]
        assert "unreadable config" in caplog.text

    def test_handles_non_mapping(self, temp_dir):
        """Test that a yaml list falls back to defaults."""
        config_file = get_config_file(temp_dir)
        config_file.parent.mkdir(parents=True)
        config_file.write_text("- a\n- b\n")

        assert load_config(temp_dir)["ignore"] == DEFAULT_CONFIG["ignore"]

    def test_handles_empty_config(self, temp_dir):
        """Test that an empty file gives defaults."""
        config_file = get_config_file(temp_dir)
        config_file.parent.mkdir(parents=True)
        config_file.write_text("")

        assert "ignore" in load_config(temp_dir)


class TestSaveConfig:
    """Tests for save_config function."""

    def test_saves_config(self, temp_dir):
        """Test saving config to file."""
        save_config(temp_dir, {"ignore": ["test.lock"]})

        with open(get_config_file(temp_dir)) as f:
            saved = yaml.safe_load(f)
        assert saved == {"ignore": ["test.lock"]}

    def test_raises_config_error(self, temp_dir):
        """Test that write failures raise ConfigError."""
        # A file where the config directory should be
        (temp_dir / ".autoforge").write_text("")

        with pytest.raises(ConfigError):
            save_config(temp_dir, {"ignore": []})


class TestIgnorePatterns:
    """Tests for ignore pattern helpers."""

    def test_returns_default_patterns(self, temp_dir):
        """Test that default patterns are returned."""
        assert "package-lock.json" in get_ignore_patterns(temp_dir)

    def test_adds_pattern(self, temp_dir):
        """Test adding a new pattern."""
        add_ignore_pattern(temp_dir, "*.log")

        assert "*.log" in get_ignore_patterns(temp_dir)

    def test_does_not_duplicate(self, temp_dir):
        """Test that adding an existing pattern doesn't create a duplicate."""
        add_ignore_pattern(temp_dir, "*.log")
        add_ignore_pattern(temp_dir, "*.log")

        assert get_ignore_patterns(temp_dir).count("*.log") == 1

    def test_removes_pattern(self, temp_dir):
        """Test removing an existing pattern."""
        assert remove_ignore_pattern(temp_dir, "poetry.lock") is True
        assert "poetry.lock" not in get_ignore_patterns(temp_dir)

    def test_remove_missing_pattern(self, temp_dir):
        """Test removing a pattern that is not there."""
        assert remove_ignore_pattern(temp_dir, "nonexistent.txt") is False
