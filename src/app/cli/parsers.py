"""
CLI argument parser configuration.

This module defines the argument parser structure for all CLI commands.
It centralizes all argument parsing logic and provides a clean interface
for the main entry point.

Command Structure:
    - map       <ttl_file>
    - through   <ttl_file> <associated_id> [--link-predicate URI]
    - split     <ttl_file> <associated_class_name>
    - roundtrip <ttl_file>
"""

import argparse


# ============================================================================
# Shared Flag Group Builders
# ============================================================================

def add_input_flags(parser: argparse.ArgumentParser) -> None:
    """Add common input-related flags."""
    parser.add_argument('ttl_file', help='Path to the Turtle file')
    parser.add_argument(
        '--force-memory',
        action='store_true',
        help='Skip memory safety checks for very large files (use with caution)'
    )


def add_output_flags(parser: argparse.ArgumentParser) -> None:
    """Add common output-related flags."""
    parser.add_argument(
        '--output', '-o',
        help='Write the result to this file instead of stdout'
    )


def add_config_flags(parser: argparse.ArgumentParser) -> None:
    """Add configuration flags."""
    parser.add_argument(
        '--config', '-c',
        help='Path to configuration file'
    )


def _add_common_flags(parser: argparse.ArgumentParser) -> None:
    add_input_flags(parser)
    add_output_flags(parser)
    add_config_flags(parser)


# ============================================================================
# Main Parser Factory
# ============================================================================

def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser with all subcommands.
    """
    parser = argparse.ArgumentParser(
        description="Map RDF Turtle graphs into per-entity records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Flatten every subject into an attribute record
    %(prog)s map people.ttl --output people.json

    # Find the memberships that point at party 23
    %(prog)s through memberships.ttl 23

    # Separate a party from its membership
    %(prog)s split party_membership.ttl Party

    # Check that a file survives parse/serialize unchanged
    %(prog)s roundtrip people.ttl
        """,
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    _add_map_parser(subparsers)
    _add_through_parser(subparsers)
    _add_split_parser(subparsers)
    _add_roundtrip_parser(subparsers)

    return parser


# ============================================================================
# Command Parsers
# ============================================================================

def _add_map_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the map command parser."""
    parser = subparsers.add_parser(
        'map',
        help='Map each subject into an attribute record (JSON)'
    )
    _add_common_flags(parser)
    parser.add_argument(
        '--include-graph',
        action='store_true',
        help="Include each record's own Turtle subgraph in the output"
    )


def _add_through_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the through command parser."""
    parser = subparsers.add_parser(
        'through',
        help='Extract the subgraphs of through entities linking to an id'
    )
    _add_common_flags(parser)
    parser.add_argument('associated_id', help='Local id of the associated entity')
    parser.add_argument(
        '--link-predicate',
        help='Only treat this predicate URI as the link (default: from config, else any)'
    )


def _add_split_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the split command parser."""
    parser = subparsers.add_parser(
        'split',
        help='Split a two-entity graph into associated-class and through graphs'
    )
    _add_common_flags(parser)
    parser.add_argument('associated_class_name', help='Local id of the associated class type')


def _add_roundtrip_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the roundtrip command parser."""
    parser = subparsers.add_parser(
        'roundtrip',
        help='Parse, serialize and re-parse a Turtle file and compare'
    )
    _add_common_flags(parser)
    parser.add_argument(
        '--show',
        action='store_true',
        help='Print the serialized Turtle'
    )
