"""Tests for logger config loading and validation."""

from pathlib import Path

import pytest

from sessionlog.config import (
    LoggerConfig,
    LoggerConfigError,
    load_logger_config,
    logger_config_from_dict,
    validate_logger_config,
)
from sessionlog.logging import Logger
from sessionlog.severity import Severity


def _write_config(tmp_path: Path, text: str) -> Path:
    config_path = tmp_path / "sessionlog.yaml"
    config_path.write_text(text)
    return config_path


class TestLoadLoggerConfig:
    """load_logger_config() with valid files."""

    def test_full_config(self, tmp_path: Path) -> None:
        """Every key is read from the YAML file."""
        config_path = _write_config(
            tmp_path,
            "path: /var/log/app.log\n"
            "level: WAR\n"
            "session: batch-42\n"
            "tag_multi_line: false\n"
            "raise_on_error: true\n",
        )

        result = load_logger_config(config_path)

        assert result == LoggerConfig(
            path=Path("/var/log/app.log"),
            level=Severity.WARNING,
            session="batch-42",
            tag_multi_line=False,
            raise_on_error=True,
        )

    def test_defaults(self, tmp_path: Path) -> None:
        """Only path is required; the rest falls back to defaults."""
        config_path = _write_config(tmp_path, "path: /tmp/app.log\n")

        result = load_logger_config(config_path)

        assert result.level is Severity.INFO
        assert result.session is None
        assert result.tag_multi_line is True
        assert result.raise_on_error is False

    def test_relative_path_resolved_against_config_dir(self, tmp_path: Path) -> None:
        """A relative log path is anchored at the config file's directory."""
        config_path = _write_config(tmp_path, "path: logs/app.log\n")

        result = load_logger_config(config_path)

        assert result.path == tmp_path.resolve() / "logs" / "app.log"

    @pytest.mark.parametrize(
        ("raw_level", "expected"),
        [("3", Severity.WARNING), ("debug", Severity.DEBUG), ("tra", Severity.TRACE)],
    )
    def test_level_forms(
        self, tmp_path: Path, raw_level: str, expected: Severity
    ) -> None:
        """Levels may be numbers, full names or short names."""
        config_path = _write_config(tmp_path, f"path: a.log\nlevel: {raw_level}\n")
        assert load_logger_config(config_path).level is expected

    def test_numeric_session_becomes_string(self, tmp_path: Path) -> None:
        """YAML integers are accepted as sessions."""
        config_path = _write_config(tmp_path, "path: a.log\nsession: 42\n")
        assert load_logger_config(config_path).session == "42"

    def test_config_drives_logger(self, tmp_path: Path) -> None:
        """A logger built from the file writes where the file says."""
        (tmp_path / "logs").mkdir()
        config_path = _write_config(
            tmp_path, "path: logs/app.log\nlevel: ERR\nsession: cfg\n"
        )
        logger = Logger.from_config(load_logger_config(config_path))

        logger.warning("skipped")
        logger.error("kept")

        content = (tmp_path / "logs" / "app.log").read_text()
        assert content.endswith(" cfg ERR S kept\n")
        assert "skipped" not in content


class TestLoggerConfigErrors:
    """Invalid config files raise LoggerConfigError."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file is an error."""
        with pytest.raises(LoggerConfigError, match="not found"):
            load_logger_config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Unparseable YAML is an error."""
        config_path = _write_config(tmp_path, "path: [unclosed\n")
        with pytest.raises(LoggerConfigError, match="Invalid YAML"):
            load_logger_config(config_path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        """The document must be a mapping."""
        config_path = _write_config(tmp_path, "- path\n- level\n")
        with pytest.raises(LoggerConfigError, match="must be a mapping"):
            load_logger_config(config_path)

    def test_missing_path(self, tmp_path: Path) -> None:
        """path is required by the schema."""
        config_path = _write_config(tmp_path, "level: INF\n")
        with pytest.raises(LoggerConfigError, match="Schema validation failed"):
            load_logger_config(config_path)

    def test_unknown_key(self, tmp_path: Path) -> None:
        """Unexpected keys are rejected."""
        config_path = _write_config(tmp_path, "path: a.log\nrotate: daily\n")
        with pytest.raises(LoggerConfigError, match="Schema validation failed"):
            load_logger_config(config_path)

    @pytest.mark.parametrize("raw_level", ["loud", "7", "-1", "true"])
    def test_bad_level(self, tmp_path: Path, raw_level: str) -> None:
        """Undefined levels are rejected before a Logger exists."""
        config_path = _write_config(tmp_path, f"path: a.log\nlevel: {raw_level}\n")
        with pytest.raises(LoggerConfigError):
            load_logger_config(config_path)

    def test_validate_logger_config_reports_path(self) -> None:
        """Validation errors name the offending key."""
        with pytest.raises(LoggerConfigError, match=r"at path: tag_multi_line"):
            validate_logger_config({"path": "a.log", "tag_multi_line": "yes"})

    def test_validate_logger_config_accepts_minimal(self) -> None:
        """A document with only path is valid."""
        validate_logger_config({"path": "a.log"})

    def test_from_dict_keeps_relative_path_without_base(self) -> None:
        """Without base_dir a relative path is left alone."""
        result = logger_config_from_dict({"path": "rel/app.log"})
        assert result.path == Path("rel/app.log")
