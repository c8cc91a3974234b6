"""Logger config loading from YAML files."""

from __future__ import annotations

import json
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema

from sessionlog.severity import InvalidLevelError, Severity, parse_level

# Shipped with the package; read once at import.
_SCHEMA = json.loads(
    (Path(__file__).resolve().parent / "logger_config.schema.json").read_text(
        encoding="utf-8"
    )
)


class LoggerConfigError(Exception):
    """Raised when logger config cannot be loaded or is invalid."""

    pass


@dataclass(frozen=True)
class LoggerConfig:
    """Settings needed to build a Logger.

    Attributes:
        path: Log file path (absolute, or relative to the working directory).
        level: Severity threshold.
        session: Explicit session ID, or None to generate one.
        tag_multi_line: Whether multi-line records are numbered.
        raise_on_error: Whether write failures raise instead of returning False.
    """

    path: Path
    level: Severity = Severity.INFO
    session: str | None = None
    tag_multi_line: bool = True
    raise_on_error: bool = False


def _load_yaml(path: Path) -> Any:
    """Load a YAML file; raise LoggerConfigError if missing or invalid."""
    if not path.exists():
        raise LoggerConfigError(f"Logger config not found: {path}")
    try:
        with path.open(encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LoggerConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise LoggerConfigError(f"Error reading {path}: {e}") from e


def validate_logger_config(raw: Any) -> None:
    """Check a raw config document against the bundled schema.

    Raises:
        LoggerConfigError: If the document does not match the schema.
    """
    try:
        jsonschema.validate(instance=raw, schema=_SCHEMA)
    except jsonschema.ValidationError as e:
        error_msg = f"Schema validation failed: {e.message}"
        if e.path:
            error_msg += f" (at path: {'/'.join(str(p) for p in e.path)})"
        raise LoggerConfigError(error_msg) from e


def logger_config_from_dict(
    raw: dict[str, Any], base_dir: Path | None = None
) -> LoggerConfig:
    """Build a LoggerConfig from a raw mapping.

    Args:
        raw: Parsed config document.
        base_dir: Directory that a relative ``path`` is resolved against.
            If None, relative paths are kept as given.

    Returns:
        Validated LoggerConfig.

    Raises:
        LoggerConfigError: If the mapping fails schema validation or names an
            unknown level.
    """
    validate_logger_config(raw)

    log_path = Path(raw["path"]).expanduser()
    if base_dir is not None and not log_path.is_absolute():
        log_path = base_dir / log_path

    try:
        level = parse_level(raw.get("level", Severity.INFO))
    except InvalidLevelError as e:
        raise LoggerConfigError(str(e)) from e

    session = raw.get("session")
    return LoggerConfig(
        path=log_path,
        level=level,
        session=str(session) if session is not None else None,
        tag_multi_line=bool(raw.get("tag_multi_line", True)),
        raise_on_error=bool(raw.get("raise_on_error", False)),
    )


def load_logger_config(config_path: Path) -> LoggerConfig:
    """Load a logger config file.

    A relative ``path`` inside the file is resolved against the directory
    holding the config file.

    Args:
        config_path: Path to a YAML config file.

    Returns:
        Validated LoggerConfig.

    Raises:
        LoggerConfigError: If the file is missing, not valid YAML, not a
            mapping, or fails validation.
    """
    config_path = Path(config_path)
    data = _load_yaml(config_path)
    if not isinstance(data, dict):
        raise LoggerConfigError(f"Logger config must be a mapping: {config_path}")
    return logger_config_from_dict(data, base_dir=config_path.resolve().parent)
