"""Tests for report configuration."""

from pathlib import Path

import pytest

from testreport_kit.config import ConfigError, ReportConfig, load_config, parse_log_level


def test_defaults_without_path() -> None:
    """No config file means default settings."""
    cfg = load_config(None)

    assert cfg == ReportConfig()
    assert not cfg.stop_on_first_error
    assert cfg.color
    assert cfg.styles.pass_ == "green"


def test_load_yaml(tmp_path: Path) -> None:
    """Settings and styles are read from YAML."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "stop_on_first_error: true\n"
        "width: 120\n"
        "styles:\n"
        "  pass: bold green\n"
        "  warning: magenta\n"
    )

    cfg = load_config(str(path))

    assert cfg.stop_on_first_error
    assert cfg.width == 120
    assert cfg.styles.pass_ == "bold green"
    assert cfg.styles.warning == "magenta"
    assert cfg.styles.failure == "bold red"


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    """An empty config file is the same as no settings."""
    path = tmp_path / "config.yaml"
    path.write_text("")

    assert load_config(str(path)) == ReportConfig()


def test_missing_file(tmp_path: Path) -> None:
    """A config path that does not exist is an error."""
    with pytest.raises(ConfigError, match="no such config file"):
        load_config(str(tmp_path / "missing.yaml"))


def test_invalid_values(tmp_path: Path) -> None:
    """Values of the wrong type are rejected."""
    path = tmp_path / "config.yaml"
    path.write_text("width: wide\n")

    with pytest.raises(ConfigError):
        load_config(str(path))


def test_log_level_is_normalised(tmp_path: Path) -> None:
    """Log levels are case-insensitive."""
    path = tmp_path / "config.yaml"
    path.write_text("log_level: debug\n")

    assert load_config(str(path)).log_level == "DEBUG"


def test_unknown_log_level(tmp_path: Path) -> None:
    """Unknown log levels are rejected as config errors."""
    path = tmp_path / "config.yaml"
    path.write_text("log_level: verbose\n")

    with pytest.raises(ConfigError, match="unknown log level"):
        load_config(str(path))


@pytest.mark.parametrize(("value", "expected"), [("info", "INFO"), ("Warning", "WARNING")])
def test_parse_log_level(value: str, expected: str) -> None:
    """Known level names are upper-cased."""
    assert parse_log_level(value) == expected


def test_parse_unknown_log_level() -> None:
    """Unknown level names raise ValueError."""
    with pytest.raises(ValueError):
        parse_log_level("verbose")
