"""
Graph mapping data types.

This module defines the structures handed to the downstream object-mapping
layer: one AttributeRecord per entity subject, and the SplitResult produced
when a combined two-entity graph is partitioned.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from rdflib import Graph, URIRef


@dataclass
class AttributeRecord:
    """
    The flattened state of one RDF subject.

    Attributes:
        id: Local id of the subject URI (e.g. "2" for http://id.example.com/2).
        attributes: Local predicate id -> object value. Literal objects are
            stored as their lexical string, URI objects as their local id.
        graph: Exactly the triples whose subject is this record's subject.
        subject: Full subject URI.

    Example:
        >>> record = AttributeRecord(id="2", attributes={"forename": "Arya"})
        >>> record["forename"]
        'Arya'
    """
    id: str
    attributes: Dict[str, str] = field(default_factory=dict)
    graph: Graph = field(default_factory=Graph, repr=False, compare=False)
    subject: Optional[URIRef] = None

    def __getitem__(self, key: str) -> str:
        return self.attributes[key]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return an attribute value, or default when the predicate is absent."""
        return self.attributes.get(key, default)

    def to_dict(self, include_graph: bool = False) -> Dict[str, Any]:
        """
        Convert to a JSON-friendly dictionary.

        Attributes are nested under "attributes" so that predicates named
        "id" or "subject" cannot collide with the record's own fields.
        """
        result: Dict[str, Any] = {
            "id": self.id,
            "subject": str(self.subject) if self.subject is not None else None,
            "attributes": dict(self.attributes),
        }
        if include_graph:
            result["graph"] = self.graph.serialize(format="turtle")
        return result


@dataclass
class SplitResult:
    """
    The two halves of a combined associated-class/through graph.

    Attributes:
        associated_class_graph: Triples of the associated entity (e.g. a
            party), including its own rdf:type.
        through_graph: Triples of the through entity (e.g. a party
            membership), including its own rdf:type and its link to the
            associated entity.
    """
    associated_class_graph: Graph
    through_graph: Graph

    def to_dict(self) -> Dict[str, str]:
        """Convert to a dictionary of Turtle strings."""
        return {
            "associated_class_graph": self.associated_class_graph.serialize(format="turtle"),
            "through_graph": self.through_graph.serialize(format="turtle"),
        }
