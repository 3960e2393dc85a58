"""
RDF Graph Mapper

High-level entry point for turning Turtle into per-entity records and
splitting combined relationship graphs.

Usage:
    from graph_mapper import GraphMapper

    mapper = GraphMapper()
    graph = mapper.create_graph_from_ttl(ttl)
    records = mapper.statements_mapper(graph)
    result = mapper.split_by_subject(graph, "Party")

The mapper carries no state; the same operations are also available as
module-level functions.
"""

from typing import List, Optional, Union

from rdflib import Graph, URIRef
from rdflib.term import Node

from formats.rdf import (
    GraphMapperError,
    ParseError,
    InvalidIdentifierError,
    StructuralMismatchError,
    TurtleCodec,
    URIUtils,
    StatementsMapper,
    ThroughGraphExtractor,
    SubjectSplitter,
    parse,
    parse_file,
    serialize,
    local_id,
    map_statements,
    find_record,
    through_graphs,
    split_by_subject,
)
from shared.models import AttributeRecord, SplitResult


__all__ = [
    'GraphMapper',
    'AttributeRecord',
    'SplitResult',
    'GraphMapperError',
    'ParseError',
    'InvalidIdentifierError',
    'StructuralMismatchError',
    'parse',
    'parse_file',
    'serialize',
    'local_id',
    'map_statements',
    'find_record',
    'through_graphs',
    'split_by_subject',
]


class GraphMapper:
    """Stateless service exposing the graph mapping operations."""

    def create_graph_from_ttl(self, ttl_data: str) -> Graph:
        """Parse Turtle data into a Graph."""
        return TurtleCodec.parse(ttl_data)

    def create_graph_from_file(self, file_path: str, force_large_file: bool = False) -> Graph:
        """Parse a Turtle file into a Graph."""
        return TurtleCodec.parse_file(file_path, force_large_file=force_large_file)

    def convert_to_ttl(self, graph: Graph) -> str:
        """Serialize a Graph to Turtle."""
        return TurtleCodec.serialize(graph)

    def get_id(self, uri: Node) -> str:
        """Return the local id of a URI."""
        return URIUtils.local_id(uri)

    def statements_mapper(self, graph: Graph) -> List[AttributeRecord]:
        """Map a graph into one AttributeRecord per subject."""
        return StatementsMapper.map(graph)

    def get_through_graphs(
        self,
        graph: Graph,
        associated_id: str,
        link_predicate: Optional[Union[str, URIRef]] = None,
    ) -> List[Graph]:
        """Return the subgraphs of through entities linking to an id."""
        return ThroughGraphExtractor.extract(graph, associated_id, link_predicate)

    def split_by_subject(self, graph: Graph, associated_class_name: str) -> SplitResult:
        """Split a two-entity graph into associated-class and through graphs."""
        return SubjectSplitter.split(graph, associated_class_name)
