"""
Base command class and protocols.

This module contains the base command class that all CLI commands inherit from,
as well as protocol definitions for dependency injection.
"""

import argparse
import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from rdflib import Graph

from ..helpers import (
    load_config,
    get_default_config_path,
    setup_logging,
    to_json,
    write_output,
)
from constants import ExitCode, MappingDefaults
from formats.rdf import GraphMapperError, TurtleCodec


logger = logging.getLogger(__name__)


# ============================================================================
# Protocols for Dependency Injection
# ============================================================================

class IGraphLoader(Protocol):
    """Protocol for loading a Turtle file into a graph."""

    def parse_file(self, file_path: str, force_large_file: bool = False) -> Graph:
        """Parse a Turtle file."""
        ...


# ============================================================================
# Base Command Class
# ============================================================================

class BaseCommand(ABC):
    """
    Base class for CLI commands.

    Provides configuration loading, logging setup, graph loading and
    exception-to-exit-code translation. Subclasses implement execute().
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        loader: Optional[IGraphLoader] = None,
    ):
        """
        Initialize the command.

        Args:
            config_path: Path to configuration file.
            loader: Optional graph loader (for dependency injection).
        """
        self._explicit_config = config_path is not None
        self.config_path = config_path or get_default_config_path()
        self._loader = loader
        self._config: Optional[Dict[str, Any]] = None

    @property
    def config(self) -> Dict[str, Any]:
        """Lazy-load configuration; a missing default config means no settings."""
        if self._config is None:
            if self._explicit_config or Path(self.config_path).exists():
                self._config = load_config(self.config_path)
            else:
                self._config = {}
        return self._config

    @property
    def mapping_config(self) -> Dict[str, Any]:
        """The 'mapping' section of the configuration."""
        section = self.config.get('mapping', {})
        return section if isinstance(section, dict) else {}

    @property
    def output_indent(self) -> int:
        indent = self.mapping_config.get('output_indent', MappingDefaults.OUTPUT_INDENT)
        return indent if isinstance(indent, int) and indent >= 0 else MappingDefaults.OUTPUT_INDENT

    def get_loader(self) -> IGraphLoader:
        """Get or create the graph loader."""
        if self._loader is None:
            self._loader = TurtleCodec()
        return self._loader

    def setup_logging_from_config(self) -> None:
        """Setup logging from the 'logging' section of the configuration."""
        log_config = self.config.get('logging', {})
        setup_logging(config=log_config if isinstance(log_config, dict) else {})

    def load_graph(self, args: argparse.Namespace) -> Graph:
        """Parse the command's input file."""
        return self.get_loader().parse_file(
            args.ttl_file,
            force_large_file=getattr(args, 'force_memory', False),
        )

    def emit(self, data: Any, args: argparse.Namespace) -> None:
        """Write a JSON-serializable result to --output or stdout."""
        write_output(to_json(data, self.output_indent), getattr(args, 'output', None))

    def run(self, args: argparse.Namespace) -> int:
        """
        Set up the environment, execute, and translate failures to exit codes.

        Returns:
            Exit code (0 for success, non-zero for error).
        """
        try:
            self.setup_logging_from_config()
        except (ValueError, OSError) as e:
            print(f"Error: Could not load configuration: {e}", file=sys.stderr)
            return ExitCode.CONFIG_ERROR

        try:
            return self.execute(args)
        except FileNotFoundError as e:
            logger.error(str(e))
            print(f"Error: {e}", file=sys.stderr)
            return ExitCode.FILE_NOT_FOUND
        except PermissionError as e:
            logger.error(str(e))
            print(f"Error: Permission denied: {e}", file=sys.stderr)
            return ExitCode.PERMISSION_DENIED
        except GraphMapperError as e:
            logger.error(str(e))
            print(f"Error: {e}", file=sys.stderr)
            return ExitCode.VALIDATION_ERROR
        except MemoryError as e:
            logger.error(f"Insufficient memory: {e}")
            print(f"Error: {e}", file=sys.stderr)
            print("Tip: Use --force-memory to bypass memory safety checks (use with caution).", file=sys.stderr)
            return ExitCode.ERROR

    @abstractmethod
    def execute(self, args: argparse.Namespace) -> int:
        """
        Execute the command.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code (0 for success, non-zero for error).
        """
        pass
