"""
CLI helper utilities.

This module provides shared utilities for CLI commands including:
- Configuration loading
- Logging setup
- Output writing
"""

import json
import logging
import os
import sys
import tempfile
from datetime import datetime, timezone
from logging import Handler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Dict, Any, List, Tuple

from constants import FileExtensions, LoggingConfig


class JSONFormatter(logging.Formatter):
    """Writes each log record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
                LoggingConfig.JSON_DATE_FORMAT
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


# Handlers installed on the root logger by setup_logging
_MANAGED_HANDLERS: List[Handler] = []


def get_default_config_path() -> str:
    """Get the default configuration file path.

    Returns:
        Path to config.json in the current working directory.
    """
    return str(Path.cwd() / "config.json")


def _clear_managed_handlers() -> None:
    """Remove handlers that were added by this module."""
    global _MANAGED_HANDLERS
    root_logger = logging.getLogger()
    for handler in _MANAGED_HANDLERS:
        root_logger.removeHandler(handler)
        handler.close()
    _MANAGED_HANDLERS = []


def _positive_int(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _build_formatter(format_style: str) -> logging.Formatter:
    if format_style == "json":
        return JSONFormatter()
    return logging.Formatter(fmt=LoggingConfig.LOG_FORMAT, datefmt=LoggingConfig.DATE_FORMAT)


def _open_log_file(file_path: str, rotation: Dict[str, Any]) -> Tuple[Optional[Handler], Optional[str]]:
    """
    Open the configured log file, falling back to the system temp directory.

    Returns:
        (handler, path actually used), or (None, None) if neither location
        is writable.
    """
    file_name = os.path.basename(file_path) or "graph_mapper.log"
    for candidate in (file_path, os.path.join(tempfile.gettempdir(), file_name)):
        try:
            directory = os.path.dirname(candidate)
            if directory:
                os.makedirs(directory, exist_ok=True)
            if rotation.get('enabled', LoggingConfig.ROTATION_ENABLED):
                max_mb = _positive_int(rotation.get('max_mb'), LoggingConfig.MAX_LOG_FILE_MB)
                handler: Handler = RotatingFileHandler(
                    candidate,
                    maxBytes=max_mb * 1024 * 1024,
                    backupCount=_positive_int(rotation.get('backup_count'), LoggingConfig.LOG_BACKUP_COUNT),
                    encoding='utf-8',
                )
            else:
                handler = logging.FileHandler(candidate, encoding='utf-8')
        except OSError as exc:
            print(f"Could not open log file {candidate}: {exc}", file=sys.stderr)
            continue
        if candidate != file_path:
            print(f"Note: Using fallback log file: {candidate}", file=sys.stderr)
        return handler, candidate
    print("Warning: No writable log file location; logging to console only", file=sys.stderr)
    return None, None


def setup_logging(config: Optional[Dict[str, Any]] = None) -> Optional[str]:
    """
    Configure the root logger from the 'logging' section of the config.

    Recognised keys: ``level``, ``format`` ("text" or "json"), ``file`` and
    ``rotation`` (``enabled``, ``max_mb``, ``backup_count``). Console output
    always goes to stderr so that results on stdout stay machine-readable.

    Returns:
        The log file path in use, or None when logging to the console only.

    Raises:
        ValueError: If the level or format is not recognised.
    """
    config = config or {}

    level_name = str(config.get('level', LoggingConfig.DEFAULT_LOG_LEVEL)).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.get('level')!r}")

    format_style = str(config.get('format', LoggingConfig.DEFAULT_FORMAT_STYLE)).lower()
    if format_style not in LoggingConfig.SUPPORTED_FORMATS:
        raise ValueError(
            f"Unknown log format {config.get('format')!r}; expected one of {LoggingConfig.SUPPORTED_FORMATS}"
        )
    formatter = _build_formatter(format_style)

    handlers: List[Handler] = [logging.StreamHandler(sys.stderr)]
    log_path = None
    if config.get('file'):
        rotation = config.get('rotation')
        file_handler, log_path = _open_log_file(
            str(config['file']), rotation if isinstance(rotation, dict) else {}
        )
        if file_handler is not None:
            handlers.append(file_handler)

    _clear_managed_handlers()
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        _MANAGED_HANDLERS.append(handler)

    if log_path:
        logging.getLogger(__name__).info(f"Logging to: {log_path}")
    return log_path


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Dictionary containing the configuration.

    Raises:
        ValueError: If config_path is empty, has the wrong extension, or the
            file contains invalid JSON.
        FileNotFoundError: If the configuration file doesn't exist.
        PermissionError: If the file cannot be read.
    """
    if not config_path:
        raise ValueError("config_path cannot be empty")

    path = Path(config_path)
    if path.suffix.lower() not in FileExtensions.CONFIG_EXTENSIONS:
        raise ValueError(f"Configuration file must be JSON: {config_path}")
    if not path.is_file():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            f"Please create a config.json file or specify one with --config"
        )

    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in configuration file {config_path} at line {e.lineno}, column {e.colno}: {e.msg}"
        ) from e
    except UnicodeDecodeError as e:
        raise ValueError(f"File encoding error in {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ValueError(f"Configuration file must contain a JSON object, got {type(config).__name__}")

    return config


def write_output(text: str, output_path: Optional[str] = None) -> None:
    """
    Write command output to a file, or to stdout when no path is given.

    Args:
        text: The rendered result.
        output_path: Optional destination file.
    """
    if not output_path:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        return

    path = Path(output_path)
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding='utf-8')
    logging.getLogger(__name__).info(f"Output written to: {output_path}")


def to_json(data: Any, indent: int) -> str:
    """Render a result as JSON."""
    return json.dumps(data, indent=indent, ensure_ascii=False)
