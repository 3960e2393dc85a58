"""
CLI command implementations.

- base.py: Base command class and protocols
- mapping.py: map, through, split and roundtrip commands
"""

from .base import (
    BaseCommand,
    IGraphLoader,
)

from .mapping import (
    MapCommand,
    ThroughCommand,
    SplitCommand,
    RoundTripCommand,
)


__all__ = [
    # Base
    'BaseCommand',
    'IGraphLoader',
    # Mapping
    'MapCommand',
    'ThroughCommand',
    'SplitCommand',
    'RoundTripCommand',
]
