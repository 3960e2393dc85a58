"""
URI helpers.

Derives the short local identifiers that the mapper uses as record ids and
attribute keys.
"""

from typing import Optional

from rdflib import RDF, URIRef
from rdflib.term import Node

from constants import MappingDefaults
from .errors import InvalidIdentifierError


class URIUtils:
    """Local id extraction for rdflib URI references."""

    @staticmethod
    def local_id(uri: Node) -> str:
        """
        Return the segment after the last '/' of a URI.

        The rdf:type predicate always maps to ``"type"``, whatever the shape
        of its namespace.

        Args:
            uri: A URIRef (plain strings are accepted and coerced).

        Returns:
            The local id string.

        Raises:
            InvalidIdentifierError: If the term is not a URI, has no '/', or
                ends with '/'.
        """
        if isinstance(uri, str) and not isinstance(uri, Node):
            uri = URIRef(uri)
        if not isinstance(uri, URIRef):
            raise InvalidIdentifierError(uri)

        if uri == RDF.type:
            return MappingDefaults.TYPE_LOCAL_ID

        _, sep, tail = str(uri).rpartition(MappingDefaults.PATH_SEPARATOR)
        if not sep or not tail:
            raise InvalidIdentifierError(uri)
        return tail

    @classmethod
    def try_local_id(cls, uri: Node) -> Optional[str]:
        """Return the local id of a URI, or None when it has none (e.g. `urn:` or a bare host)."""
        try:
            return cls.local_id(uri)
        except InvalidIdentifierError:
            return None

    @staticmethod
    def is_reference(term: Node) -> bool:
        """Check whether an object term points at another entity."""
        return isinstance(term, URIRef)


def local_id(uri: Node) -> str:
    """Module-level shortcut for URIUtils.local_id."""
    return URIUtils.local_id(uri)
