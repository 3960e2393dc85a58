#!/usr/bin/env python3
"""
RDF Graph Mapper command line.

Usage:
    python main.py map <ttl_file> [--output <records.json>] [--include-graph]
    python main.py through <ttl_file> <associated_id> [--link-predicate <uri>]
    python main.py split <ttl_file> <associated_class_name>
    python main.py roundtrip <ttl_file> [--show]

All commands accept --config <config.json> and --force-memory.
"""

import sys
from typing import Dict, List, Optional, Type

from app.cli.commands import (
    BaseCommand,
    MapCommand,
    ThroughCommand,
    SplitCommand,
    RoundTripCommand,
)
from app.cli.parsers import create_argument_parser
from constants import ExitCode


COMMANDS: Dict[str, Type[BaseCommand]] = {
    'map': MapCommand,
    'through': ThroughCommand,
    'split': SplitCommand,
    'roundtrip': RoundTripCommand,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the selected command."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return ExitCode.ERROR

    command = COMMANDS[args.command](config_path=getattr(args, 'config', None))
    return int(command.run(args))


if __name__ == '__main__':
    sys.exit(main())
