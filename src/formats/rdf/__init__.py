"""
RDF package - graph mapping components.

This package contains the components that turn Turtle into per-entity
records and partition combined relationship graphs.

Components:
- turtle_codec: Turtle parsing/serialization with memory checks
- uri_utils: Local id extraction from URIs
- statements_mapper: Per-subject attribute records
- graph_splitter: Through-graph discovery and subject splitting
- graph_utils: Canonical traversal and subgraph construction
- errors: Exception hierarchy
"""

from .errors import (
    GraphMapperError,
    ParseError,
    InvalidIdentifierError,
    StructuralMismatchError,
)
from .turtle_codec import (
    MemoryManager,
    TurtleCodec,
    parse,
    parse_file,
    serialize,
)
from .uri_utils import URIUtils, local_id
from .statements_mapper import StatementsMapper, map_statements, find_record
from .graph_splitter import (
    ThroughGraphExtractor,
    SubjectSplitter,
    through_graphs,
    split_by_subject,
)

__all__ = [
    # Errors
    'GraphMapperError',
    'ParseError',
    'InvalidIdentifierError',
    'StructuralMismatchError',
    # Codec
    'MemoryManager',
    'TurtleCodec',
    'parse',
    'parse_file',
    'serialize',
    # Identifiers
    'URIUtils',
    'local_id',
    # Mapping
    'StatementsMapper',
    'map_statements',
    'find_record',
    # Splitting
    'ThroughGraphExtractor',
    'SubjectSplitter',
    'through_graphs',
    'split_by_subject',
]
