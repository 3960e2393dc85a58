"""
Centralized configuration constants for the RDF graph mapper.

This module provides a single source of truth for all configuration constants,
default values, and limits used throughout the application.
"""

from enum import IntEnum
from typing import Final

# ============================================================================
# Exit Codes
# ============================================================================

class ExitCode(IntEnum):
    """Standard exit codes for CLI commands.

    Following Unix conventions:
    - 0: Success
    - 1: General error
    - 2: Validation/syntax error
    - 3+: Specific error categories
    """
    SUCCESS = 0
    ERROR = 1
    VALIDATION_ERROR = 2
    CONFIG_ERROR = 3
    FILE_NOT_FOUND = 5
    PERMISSION_DENIED = 6


# ============================================================================
# Memory Management
# ============================================================================

class MemoryLimits:
    """Memory management constants."""

    MAX_SAFE_FILE_MB: Final[int] = 500
    """Default maximum file size without explicit override (MB)."""

    MEMORY_MULTIPLIER: Final[float] = 3.5
    """RDFlib typically uses ~3-4x file size in memory."""

    MIN_AVAILABLE_MEMORY_MB: Final[int] = 512
    """Minimum available memory required before processing (MB)."""

    LOAD_FACTOR: Final[float] = 0.7
    """Fraction of available memory treated as the safe threshold."""


# ============================================================================
# Mapping Defaults
# ============================================================================

class MappingDefaults:
    """Graph mapping constants."""

    TYPE_LOCAL_ID: Final[str] = "type"
    """Local id reported for the rdf:type predicate."""

    PATH_SEPARATOR: Final[str] = "/"
    """Separator whose last occurrence starts a URI's local id."""

    RDF_FORMAT: Final[str] = "turtle"
    """rdflib format name used for parsing and serialization."""

    OUTPUT_INDENT: Final[int] = 2
    """JSON indent for CLI output."""

    PROGRESS_THRESHOLD: Final[int] = 1000
    """Subjects needed before a progress bar is shown."""


# ============================================================================
# File Extensions
# ============================================================================

class FileExtensions:
    """Supported file extensions."""

    TTL_EXTENSIONS: Final[tuple] = ('.ttl', '.turtle')
    """Valid Turtle file extensions."""

    CONFIG_EXTENSIONS: Final[tuple] = ('.json',)
    """Valid configuration file extensions."""


# ============================================================================
# Logging
# ============================================================================

class LoggingConfig:
    """Logging configuration."""

    DEFAULT_LOG_LEVEL: Final[str] = "INFO"
    """Default logging level."""

    LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    """Default log format string."""

    DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
    """Default date format for logs."""

    DEFAULT_FORMAT_STYLE: Final[str] = "text"
    """Human-readable formatter style."""

    JSON_DATE_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S.%fZ"
    """ISO-8601 timestamp format for structured logs."""

    SUPPORTED_FORMATS: Final[tuple[str, ...]] = ("text", "json")
    """Supported formatter styles."""

    MAX_LOG_FILE_MB: Final[int] = 10
    """Maximum log file size before rotation (MB)."""

    LOG_BACKUP_COUNT: Final[int] = 5
    """Number of backup log files to keep."""

    ROTATION_ENABLED: Final[bool] = True
    """Enable log rotation by default when a file handler is configured."""
