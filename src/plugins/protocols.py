"""
Protocol Definitions for graph mapping collaborators.

This module defines the protocols (interfaces) that the mapping components
rely on. Using protocols allows for duck typing while still providing type
hints and documentation.

Protocols:
    TripleMatcher: Triple-pattern matching over a graph (the triple store)
    ParserProtocol: Parse Turtle content into a graph
    SerializerProtocol: Serialize a graph back to Turtle
"""

from typing import (
    Iterator,
    Optional,
    Protocol,
    Tuple,
    runtime_checkable,
)

from rdflib import Graph
from rdflib.term import Node

# (subject, predicate, object)
Triple = Tuple[Node, Node, Node]

# Each position is either a concrete term or None as a wildcard
TriplePattern = Tuple[Optional[Node], Optional[Node], Optional[Node]]


__all__ = [
    "Triple",
    "TriplePattern",
    "TripleMatcher",
    "ParserProtocol",
    "SerializerProtocol",
    "is_triple_matcher",
    "is_parser",
    "is_serializer",
]


@runtime_checkable
class TripleMatcher(Protocol):
    """
    Protocol for the triple store consumed by the mapper.

    The mapper never indexes a graph itself; everything it needs is
    expressed as a pattern query where None matches any term. rdflib's
    Graph satisfies this protocol out of the box, but any store offering the
    same three operations (in-memory index, B-tree, linear scan) will do.

    Example:
        for s, p, o in graph.triples((subject, None, None)):
            ...
    """

    def triples(self, pattern: TriplePattern) -> Iterator[Triple]:
        """
        Return the triples matching a pattern.

        Args:
            pattern: (subject, predicate, object) with None as wildcard.
        """
        ...

    def __iter__(self) -> Iterator[Triple]:
        """Iterate over all triples."""
        ...

    def __len__(self) -> int:
        """Number of triples held."""
        ...

    def __contains__(self, triple: Triple) -> bool:
        """Membership test for a concrete triple."""
        ...


@runtime_checkable
class ParserProtocol(Protocol):
    """
    Protocol for parsing Turtle content.

    Example implementation:
        class TurtleParser:
            def parse(self, content: str) -> Graph:
                g = Graph()
                g.parse(data=content, format='turtle')
                return g
    """

    def parse(self, content: str) -> Graph:
        """
        Parse content string.

        Raises:
            ValueError: If content cannot be parsed.
        """
        ...

    def parse_file(self, file_path: str) -> Graph:
        """
        Parse a file.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If content cannot be parsed.
        """
        ...


@runtime_checkable
class SerializerProtocol(Protocol):
    """Protocol for serializing a graph to text."""

    def serialize(self, graph: Graph) -> str:
        """Serialize a graph deterministically."""
        ...


# ---------------------------------------------------------------------------
# Type checking utilities
# ---------------------------------------------------------------------------

def is_triple_matcher(obj: object) -> bool:
    """Check if an object implements TripleMatcher."""
    return isinstance(obj, TripleMatcher)


def is_parser(obj: object) -> bool:
    """Check if an object implements ParserProtocol."""
    return isinstance(obj, ParserProtocol)


def is_serializer(obj: object) -> bool:
    """Check if an object implements SerializerProtocol."""
    return isinstance(obj, SerializerProtocol)
