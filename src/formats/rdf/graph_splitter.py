"""
Graph Splitter Module

Partitions combined graphs that describe many-to-many "through"
relationships (e.g. Party <- PartyMembership -> Person) into per-entity
subgraphs.

Components:
- ThroughGraphExtractor: Finds the subgraphs of through entities linking to an id
- SubjectSplitter: Splits a two-entity graph into associated and through halves
"""

import logging
from typing import Dict, List, Optional, Union

from rdflib import RDF, Graph, URIRef
from rdflib.term import Node

from shared.models import SplitResult
from .errors import StructuralMismatchError
from .graph_utils import canonical_triples, group_by_subject, iter_typed_subjects, new_graph
from .uri_utils import URIUtils

logger = logging.getLogger(__name__)


class ThroughGraphExtractor:
    """
    Finds through entities by the local id of the entity they link to.

    A subject qualifies when one of its non-type URI objects has a local id
    equal to the requested id. The type triple is never treated as a link.
    """

    @staticmethod
    def _links_to(
        predicate: Node,
        obj: Node,
        associated_id: str,
        link_predicate: Optional[URIRef],
    ) -> bool:
        if predicate == RDF.type or not URIUtils.is_reference(obj):
            return False
        if link_predicate is not None and predicate != link_predicate:
            return False
        return URIUtils.try_local_id(obj) == associated_id

    @classmethod
    def extract(
        cls,
        graph: Graph,
        associated_id: str,
        link_predicate: Optional[Union[str, URIRef]] = None,
    ) -> List[Graph]:
        """
        Return the full subgraph of every subject linking to ``associated_id``.

        Args:
            graph: Combined graph (any TripleMatcher).
            associated_id: Local id of the associated entity, e.g. "23".
            link_predicate: Only consider this predicate as the link, if given.

        Returns:
            One graph per matching subject, in first-appearance order. Empty
            when nothing links to the id.
        """
        link = URIRef(link_predicate) if link_predicate is not None else None
        results: List[Graph] = []

        for subject, triples in group_by_subject(graph).items():
            if any(cls._links_to(p, o, associated_id, link) for _, p, o in triples):
                logger.debug(f"{subject} links to '{associated_id}' ({len(triples)} triples)")
                results.append(new_graph(graph, triples))

        if not results:
            logger.info(f"No through subjects link to '{associated_id}'")
        else:
            logger.info(f"Found {len(results)} through graphs for '{associated_id}'")
        return results


class SubjectSplitter:
    """
    Splits a graph holding exactly two typed subjects.

    One subject must be typed with a class whose local id is the associated
    class name; the other is the through entity. Triples are bucketed purely
    by subject, so each half keeps its own rdf:type triple and never sees the
    other subject's.
    """

    @staticmethod
    def _types_by_subject(graph: Graph) -> Dict[Node, List[str]]:
        types: Dict[Node, List[str]] = {}
        for subject, _, type_uri in iter_typed_subjects(graph, RDF.type):
            names = types.setdefault(subject, [])
            name = URIUtils.try_local_id(type_uri)
            if name is None:
                logger.debug(f"Type {type_uri} of {subject} has no local id")
            else:
                names.append(name)
        return types

    @classmethod
    def split(cls, graph: Graph, associated_class_name: str) -> SplitResult:
        """
        Split a combined graph into associated-class and through graphs.

        Args:
            graph: Graph with exactly two typed subjects.
            associated_class_name: Local id of the associated class type,
                e.g. "DummyParty".

        Raises:
            StructuralMismatchError: If the graph does not hold exactly two
                subjects that are both typed, or if not exactly one of them
                is typed ``associated_class_name``.
        """
        types = cls._types_by_subject(graph)
        subjects = list(group_by_subject(graph))

        if len(types) != 2 or len(subjects) != 2:
            untyped = [str(s) for s in subjects if s not in types]
            raise StructuralMismatchError(
                f"Expected exactly two typed subjects, found {len(types)} typed "
                f"of {len(subjects)} subjects"
                + (f" (untyped: {', '.join(untyped)})" if untyped else "")
            )

        matching = [s for s, names in types.items() if associated_class_name in names]
        if len(matching) != 1:
            observed = {str(s): names for s, names in types.items()}
            raise StructuralMismatchError(
                f"Expected exactly one subject typed '{associated_class_name}', "
                f"found {len(matching)}: {observed}"
            )

        associated_subject = matching[0]
        through_subject = next(s for s in types if s != associated_subject)

        associated_triples = []
        through_triples = []
        for triple in canonical_triples(graph):
            if triple[0] == associated_subject:
                associated_triples.append(triple)
            else:
                through_triples.append(triple)

        logger.info(
            f"Split graph: {associated_subject} ({len(associated_triples)} triples), "
            f"{through_subject} ({len(through_triples)} triples)"
        )
        return SplitResult(
            associated_class_graph=new_graph(graph, associated_triples),
            through_graph=new_graph(graph, through_triples),
        )


def through_graphs(
    graph: Graph,
    associated_id: str,
    link_predicate: Optional[Union[str, URIRef]] = None,
) -> List[Graph]:
    """Return the subgraphs of through entities linking to ``associated_id``."""
    return ThroughGraphExtractor.extract(graph, associated_id, link_predicate)


def split_by_subject(graph: Graph, associated_class_name: str) -> SplitResult:
    """Split a two-entity graph into associated-class and through graphs."""
    return SubjectSplitter.split(graph, associated_class_name)
