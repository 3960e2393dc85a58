"""
Statements Mapper Module

Groups the triples of a graph by subject and flattens each subject into an
AttributeRecord for the object-mapping layer.
"""

import logging
from typing import Iterable, List, Optional

from rdflib import Graph, Literal
from rdflib.term import Node
from tqdm import tqdm

from constants import MappingDefaults
from shared.models import AttributeRecord
from .graph_utils import group_by_subject, new_graph
from .uri_utils import URIUtils

logger = logging.getLogger(__name__)


class StatementsMapper:
    """
    Maps graph statements into per-subject attribute records.

    Records come back in first-appearance order of their subject in the
    graph's canonical (sorted) iteration. When a subject repeats a predicate,
    the value seen last in that order wins in ``attributes``; every triple is
    still kept in the record's graph.
    """

    @staticmethod
    def object_value(term: Node) -> str:
        """
        Convert a triple object into an attribute value.

        Literals give their lexical form, URI references give their local id.

        Raises:
            InvalidIdentifierError: For blank nodes or other unsupported terms.
        """
        if isinstance(term, Literal):
            return str(term)
        return URIUtils.local_id(term)

    @classmethod
    def map(cls, graph: Graph) -> List[AttributeRecord]:
        """
        Map a graph into one AttributeRecord per subject.

        Args:
            graph: Graph to map (any TripleMatcher).

        Returns:
            Records in first-appearance subject order.

        Raises:
            InvalidIdentifierError: If a subject, predicate or object has no
                local id (e.g. blank nodes).
        """
        groups = group_by_subject(graph)
        records: List[AttributeRecord] = []

        for subject, triples in tqdm(
            groups.items(),
            desc="Mapping subjects",
            unit="subject",
            disable=len(groups) < MappingDefaults.PROGRESS_THRESHOLD,
        ):
            record = AttributeRecord(
                id=URIUtils.local_id(subject),
                graph=new_graph(graph, triples),
                subject=subject,
            )
            for _, predicate, obj in triples:
                key = URIUtils.local_id(predicate)
                value = cls.object_value(obj)
                if key in record.attributes and record.attributes[key] != value:
                    logger.debug(
                        f"Predicate '{key}' repeated on {subject}; "
                        f"'{value}' replaces '{record.attributes[key]}'"
                    )
                record.attributes[key] = value
            records.append(record)

        logger.info(f"Mapped {len(graph)} triples into {len(records)} records")
        return records


def map_statements(graph: Graph) -> List[AttributeRecord]:
    """Map a graph into per-subject attribute records."""
    return StatementsMapper.map(graph)


def find_record(records: Iterable[AttributeRecord], record_id: str) -> Optional[AttributeRecord]:
    """Return the first record with the given id, or None."""
    return next((record for record in records if record.id == record_id), None)
