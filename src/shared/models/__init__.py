"""
Shared data models for the graph mapper.

Usage:
    from shared.models import AttributeRecord, SplitResult
"""

from .mapping_types import (
    AttributeRecord,
    SplitResult,
)

__all__ = [
    "AttributeRecord",
    "SplitResult",
]
