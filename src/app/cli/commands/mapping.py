"""
Graph mapping commands: map, through, split, roundtrip.
"""

import argparse

from .base import BaseCommand
from constants import ExitCode
from formats.rdf import (
    StatementsMapper,
    SubjectSplitter,
    ThroughGraphExtractor,
    TurtleCodec,
)


class MapCommand(BaseCommand):
    """Print one attribute record per subject as JSON."""

    def execute(self, args: argparse.Namespace) -> int:
        graph = self.load_graph(args)
        records = StatementsMapper.map(graph)
        include_graph = getattr(args, 'include_graph', False)
        self.emit([record.to_dict(include_graph=include_graph) for record in records], args)
        return ExitCode.SUCCESS


class ThroughCommand(BaseCommand):
    """Print the Turtle subgraphs of through entities linking to an id."""

    def execute(self, args: argparse.Namespace) -> int:
        graph = self.load_graph(args)
        link_predicate = args.link_predicate or self.mapping_config.get('link_predicate')
        graphs = ThroughGraphExtractor.extract(graph, args.associated_id, link_predicate)
        self.emit([TurtleCodec.serialize(g) for g in graphs], args)
        return ExitCode.SUCCESS


class SplitCommand(BaseCommand):
    """Print the associated-class and through halves of a graph as Turtle."""

    def execute(self, args: argparse.Namespace) -> int:
        graph = self.load_graph(args)
        result = SubjectSplitter.split(graph, args.associated_class_name)
        self.emit(result.to_dict(), args)
        return ExitCode.SUCCESS


class RoundTripCommand(BaseCommand):
    """Check that a file parses back to the same graph after serialization."""

    def execute(self, args: argparse.Namespace) -> int:
        graph = self.load_graph(args)
        ttl, matches = TurtleCodec.reserialize(graph)

        report = {
            "file": args.ttl_file,
            "triples": len(graph),
            "round_trip_equal": matches,
        }
        if getattr(args, 'show', False):
            report["turtle"] = ttl
        self.emit(report, args)

        if not matches:
            return ExitCode.VALIDATION_ERROR
        return ExitCode.SUCCESS
