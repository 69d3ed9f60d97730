"""Tests for configuration loading."""

import pytest
from pathlib import Path

from weeknotes.config import load_config

_ENV_KEYS = ["WEEKNOTES_FILE", "WEEKNOTES_AUTOLOAD", "WEEKNOTES_LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_env(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestConfig:
    def test_defaults(self):
        config = load_config()
        assert config.default_file is None
        assert config.autoload is False
        assert config.log_level == "WARNING"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("WEEKNOTES_FILE", "week.txt")
        monkeypatch.setenv("WEEKNOTES_AUTOLOAD", "yes")
        monkeypatch.setenv("WEEKNOTES_LOG_LEVEL", "DEBUG")

        config = load_config()
        assert config.default_file == Path("week.txt")
        assert config.autoload is True
        assert config.log_level == "DEBUG"

    def test_toml_file(self, tmp_path: Path):
        toml_path = tmp_path / "custom.toml"
        toml_path.write_text("""
default_file = "notes/week.txt"
autoload = true
log_level = "INFO"
""")
        config = load_config(toml_path)
        assert config.default_file == Path("notes/week.txt")
        assert config.autoload is True
        assert config.log_level == "INFO"

    def test_toml_in_cwd(self, tmp_path: Path):
        (tmp_path / "weeknotes.toml").write_text('default_file = "cwd.txt"\n')
        config = load_config()
        assert config.default_file == Path("cwd.txt")

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("WEEKNOTES_AUTOLOAD", "0")

        toml_path = tmp_path / "weeknotes.toml"
        toml_path.write_text("autoload = true\n")
        config = load_config(toml_path)
        assert config.autoload is False  # env wins

    def test_toml_non_string_values(self, tmp_path: Path):
        toml_path = tmp_path / "weeknotes.toml"
        toml_path.write_text("autoload = 1\nlog_level = 10\n")
        config = load_config(toml_path)
        assert config.autoload is True
        assert config.log_level == "10"
