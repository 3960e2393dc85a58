"""
Turtle Codec Module

This module parses Turtle text into rdflib graphs and serializes graphs back
to Turtle.

Components:
- MemoryManager: Pre-flight memory checks before parsing large files
- TurtleCodec: Turtle parsing/serialization with atomic failure semantics
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

import psutil
from rdflib import BNode, Graph
from rdflib.compare import isomorphic

from constants import FileExtensions, MappingDefaults, MemoryLimits
from .errors import ParseError

logger = logging.getLogger(__name__)


class MemoryManager:
    """
    Manage memory usage before parsing Turtle files.

    Provides pre-flight memory checks so that oversized files fail with a
    helpful message instead of exhausting the process.
    """

    MIN_AVAILABLE_MB = MemoryLimits.MIN_AVAILABLE_MEMORY_MB // 2
    MAX_SAFE_FILE_MB = MemoryLimits.MAX_SAFE_FILE_MB
    MEMORY_MULTIPLIER = MemoryLimits.MEMORY_MULTIPLIER
    LOAD_FACTOR = MemoryLimits.LOAD_FACTOR

    @staticmethod
    def get_available_memory_mb() -> float:
        """
        Get available system memory in MB.

        Returns:
            Available memory in MB, or the minimum threshold if detection fails.
        """
        try:
            return psutil.virtual_memory().available / (1024 * 1024)
        except (OSError, RuntimeError) as e:
            logger.warning(f"Could not determine available memory: {e}")
            return MemoryManager.MIN_AVAILABLE_MB

    @classmethod
    def check_memory_available(cls, file_size_mb: float, force: bool = False) -> Tuple[bool, str]:
        """
        Check if enough memory is available to parse a file.

        Args:
            file_size_mb: Size of the file in MB.
            force: If True, skip safety checks and allow large files.

        Returns:
            Tuple of (can_proceed: bool, message: str)
        """
        estimated_usage_mb = file_size_mb * cls.MEMORY_MULTIPLIER

        if not force and file_size_mb > cls.MAX_SAFE_FILE_MB:
            return False, (
                f"File size ({file_size_mb:.1f}MB) exceeds safe limit ({cls.MAX_SAFE_FILE_MB}MB). "
                f"Estimated memory required: ~{estimated_usage_mb:.0f}MB. "
                f"To process anyway, use --force-memory or split the file."
            )

        available_mb = cls.get_available_memory_mb()
        if available_mb < cls.MIN_AVAILABLE_MB:
            return False, (
                f"Insufficient free memory. "
                f"Available: {available_mb:.0f}MB, "
                f"Minimum required: {cls.MIN_AVAILABLE_MB}MB."
            )

        safe_threshold_mb = available_mb * cls.LOAD_FACTOR
        if estimated_usage_mb > safe_threshold_mb:
            if force:
                return True, (
                    f"WARNING: File may exceed safe memory limits "
                    f"(estimated ~{estimated_usage_mb:.0f}MB, threshold {safe_threshold_mb:.0f}MB). "
                    f"Proceeding due to force flag."
                )
            return False, (
                f"Graph may be too large for available memory. "
                f"File size: {file_size_mb:.1f}MB, "
                f"Estimated parsing memory: ~{estimated_usage_mb:.0f}MB, "
                f"Safe threshold: {safe_threshold_mb:.0f}MB."
            )

        return True, (
            f"Memory OK: File {file_size_mb:.1f}MB, "
            f"estimated usage ~{estimated_usage_mb:.0f}MB of {available_mb:.0f}MB available"
        )


class TurtleCodec:
    """
    Parses and serializes Turtle.

    Parsing is all-or-nothing: content is parsed into a private Graph which is
    only returned when rdflib accepted the whole document. Both double- and
    single-quoted string literals are valid Turtle and produce equal Literal
    values, so quote style never leaks into the graph.
    """

    @staticmethod
    def parse(ttl_content: str, source: Optional[str] = None) -> Graph:
        """
        Parse Turtle content into a new graph.

        Args:
            ttl_content: The Turtle document.
            source: Optional label (e.g. file path) for error messages.

        Returns:
            The parsed Graph.

        Raises:
            ParseError: If the content is not a string or is not valid Turtle.
        """
        if ttl_content is None:
            raise ParseError("No Turtle content provided", source)
        if not isinstance(ttl_content, str):
            raise ParseError(f"Turtle content must be a string, got {type(ttl_content).__name__}", source)

        if not ttl_content.strip():
            logger.warning("Empty Turtle content - returning an empty graph")
            return Graph(bind_namespaces="core")

        graph = Graph(bind_namespaces="core")
        try:
            graph.parse(data=ttl_content, format=MappingDefaults.RDF_FORMAT)
        except Exception as e:
            logger.error(f"Failed to parse Turtle content: {e}")
            raise ParseError(f"Invalid Turtle syntax: {e}", source) from e

        if any(isinstance(term, BNode) for triple in graph for term in triple):
            logger.warning("Parsed graph contains blank nodes; they cannot be mapped to local ids")

        logger.info(f"Successfully parsed {len(graph)} triples")
        return graph

    @staticmethod
    def parse_file(file_path: str, force_large_file: bool = False) -> Graph:
        """
        Parse a Turtle file with memory safety checks.

        Args:
            file_path: Path to the Turtle file.
            force_large_file: If True, skip memory safety checks for large files.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            MemoryError: If insufficient memory is available.
            ParseError: If the file has invalid syntax or encoding.
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {file_path}")
        if path.suffix.lower() not in FileExtensions.TTL_EXTENSIONS:
            logger.warning(f"Unexpected extension '{path.suffix}' for a Turtle file: {file_path}")

        file_size_mb = path.stat().st_size / (1024 * 1024)
        logger.info(f"File size: {file_size_mb:.2f} MB")

        can_proceed, memory_message = MemoryManager.check_memory_available(
            file_size_mb,
            force=force_large_file
        )
        if not can_proceed:
            logger.error(f"Memory check failed: {memory_message}")
            raise MemoryError(memory_message)
        logger.debug(f"Memory check: {memory_message}")

        try:
            ttl_content = path.read_text(encoding='utf-8')
        except UnicodeDecodeError as e:
            raise ParseError(f"File is not valid UTF-8: {e}", str(path)) from e

        return TurtleCodec.parse(ttl_content, source=str(path))

    @staticmethod
    def serialize(graph: Graph) -> str:
        """
        Serialize a graph to Turtle.

        rdflib's Turtle serializer orders prefixes, subjects and predicates
        (rdf:type first), so equal graphs produce identical text.
        """
        ttl = graph.serialize(format=MappingDefaults.RDF_FORMAT)
        if isinstance(ttl, bytes):
            ttl = ttl.decode('utf-8')
        logger.debug(f"Serialized {len(graph)} triples to Turtle")
        return ttl

    @staticmethod
    def graphs_equal(first: Graph, second: Graph) -> bool:
        """Set equality of two graphs (isomorphism, blank nodes aside)."""
        return len(first) == len(second) and isomorphic(first, second)

    @classmethod
    def reserialize(cls, graph: Graph) -> Tuple[str, bool]:
        """
        Serialize a graph and check that the Turtle parses back to it.

        Returns:
            (turtle, matches) where matches is False if re-parsing changed
            the graph.
        """
        ttl = cls.serialize(graph)
        reparsed = cls.parse(ttl, source="serialized output")
        matches = cls.graphs_equal(graph, reparsed)
        if not matches:
            logger.warning(
                f"Round trip mismatch: {len(graph)} triples before, {len(reparsed)} after"
            )
        return ttl, matches

    @classmethod
    def round_trip(cls, ttl_content: str) -> bool:
        """
        Parse, serialize and re-parse content, then compare the graphs.

        Raises:
            ParseError: If the content is not valid Turtle.
        """
        _, matches = cls.reserialize(cls.parse(ttl_content))
        return matches


def parse(ttl_content: str) -> Graph:
    """Parse Turtle content into a Graph."""
    return TurtleCodec.parse(ttl_content)


def parse_file(file_path: str, force_large_file: bool = False) -> Graph:
    """Parse a Turtle file into a Graph."""
    return TurtleCodec.parse_file(file_path, force_large_file=force_large_file)


def serialize(graph: Graph) -> str:
    """Serialize a Graph to Turtle."""
    return TurtleCodec.serialize(graph)
