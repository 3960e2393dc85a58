"""
Exceptions raised by the RDF graph mapping components.

All errors derive from ValueError so callers that already guard Turtle
handling with ``except ValueError`` keep working.
"""

from typing import Optional


class GraphMapperError(ValueError):
    """Base class for graph mapping failures."""


class ParseError(GraphMapperError):
    """
    Raised when Turtle content cannot be parsed.

    Attributes:
        source: Optional file path or label for the content.
    """

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class InvalidIdentifierError(GraphMapperError):
    """Raised when no local id can be derived from a term."""

    def __init__(self, term: object) -> None:
        self.term = term
        super().__init__(f"Cannot derive a local id from {term!r}")


class StructuralMismatchError(GraphMapperError):
    """Raised when a graph does not have the shape an operation requires."""
