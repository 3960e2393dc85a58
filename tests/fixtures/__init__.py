"""
Centralized test fixtures for the graph mapper test suite.

Usage:
    from fixtures import build_people_graph, SCHEMA, entity

Or use the pytest fixtures in conftest.py which call these builders.
"""

from .graph_fixtures import (
    DATA_URI_PREFIX,
    ID,
    SCHEMA,
    entity,
    date,
    # Builders
    add_person,
    add_party,
    add_party_membership,
    build_person_one_graph,
    build_people_graph,
    build_party_one_graph,
    build_party_membership_graph,
    build_party_and_party_membership_one_graph,
    # Turtle text
    PERSON_ONE_TTL,
    BUDDY_TTL_SINGLE_QUOTES,
    BUDDY_TTL_DOUBLE_QUOTES,
    PARTY_MEMBERSHIP_ONE_TTL,
    INVALID_TTL,
)

__all__ = [
    "DATA_URI_PREFIX",
    "ID",
    "SCHEMA",
    "entity",
    "date",
    "add_person",
    "add_party",
    "add_party_membership",
    "build_person_one_graph",
    "build_people_graph",
    "build_party_one_graph",
    "build_party_membership_graph",
    "build_party_and_party_membership_one_graph",
    "PERSON_ONE_TTL",
    "BUDDY_TTL_SINGLE_QUOTES",
    "BUDDY_TTL_DOUBLE_QUOTES",
    "PARTY_MEMBERSHIP_ONE_TTL",
    "INVALID_TTL",
]
