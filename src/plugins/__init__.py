"""
Collaborator interfaces for the graph mapper.

The mapper consumes a triple store through the TripleMatcher protocol and
produces/consumes Turtle through the parser and serializer protocols.

Usage:
    from plugins import TripleMatcher, is_triple_matcher

    assert is_triple_matcher(graph)
"""

from .protocols import (
    Triple,
    TriplePattern,
    TripleMatcher,
    ParserProtocol,
    SerializerProtocol,
    is_triple_matcher,
    is_parser,
    is_serializer,
)

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
