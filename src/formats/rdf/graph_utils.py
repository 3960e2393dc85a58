"""
Graph traversal helpers shared by the mapper and the splitter.

Every helper reads its input through triple-pattern matching only and builds
new graphs instead of modifying the one it was given.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional

from rdflib import Graph
from rdflib.term import Node

from plugins.protocols import Triple, TripleMatcher

logger = logging.getLogger(__name__)


def canonical_triples(graph: TripleMatcher) -> List[Triple]:
    """
    Return all triples of a graph in canonical (sorted) order.

    Sorting makes "first appearance" independent of how the graph was built,
    so two equal graphs are always traversed the same way.
    """
    return sorted(graph.triples((None, None, None)))


def group_by_subject(graph: TripleMatcher) -> Dict[Node, List[Triple]]:
    """
    Group triples by subject.

    Returns:
        Dict keyed by subject in first-appearance order; each value keeps the
        subject's triples in canonical order.
    """
    groups: Dict[Node, List[Triple]] = {}
    for triple in canonical_triples(graph):
        groups.setdefault(triple[0], []).append(triple)
    logger.debug(f"Grouped triples into {len(groups)} subjects")
    return groups


def new_graph(source: Optional[TripleMatcher] = None, triples: Iterable[Triple] = ()) -> Graph:
    """
    Build a fresh Graph from triples, keeping the source's prefix bindings.

    Args:
        source: Graph whose namespace bindings should be copied, if any.
        triples: Triples to add.
    """
    graph = Graph(bind_namespaces="core")
    namespaces = getattr(source, 'namespaces', None)
    if namespaces is not None:
        for prefix, namespace in namespaces():
            graph.bind(prefix, namespace, override=True, replace=True)
    for triple in triples:
        graph.add(triple)
    return graph


def iter_typed_subjects(graph: TripleMatcher, type_predicate: Node) -> Iterator[Triple]:
    """Yield type triples in canonical order."""
    yield from sorted(graph.triples((None, type_predicate, None)))
