"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests
    pytest -m integration   # Integration tests (CLI, files on disk)

Graph builders live in tests/fixtures/ and are wrapped here as fixtures so
that every test receives a freshly built graph.
"""

import pytest
import sys
import os

# Add src to path for imports
src_dir = os.path.join(os.path.dirname(__file__), '..', 'src')
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

# Add tests directory to path for fixtures import
tests_dir = os.path.dirname(__file__)
if tests_dir not in sys.path:
    # Ensure src directory stays ahead of tests for module resolution
    sys.path.insert(1, tests_dir)

from fixtures import (
    PERSON_ONE_TTL,
    PARTY_MEMBERSHIP_ONE_TTL,
    build_people_graph,
    build_party_membership_graph,
    build_party_and_party_membership_one_graph,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: Integration tests requiring setup")


# =============================================================================
# Graph Fixtures
# =============================================================================

@pytest.fixture
def people_graph():
    """Persons 1 (Daenerys Targaryen) and 2 (Arya Stark)."""
    return build_people_graph()


@pytest.fixture
def party_membership_graph():
    """Three memberships, two of them linking to party 23."""
    return build_party_membership_graph()


@pytest.fixture
def party_and_membership_graph():
    """Party 23 and membership 25 in one graph."""
    return build_party_and_party_membership_one_graph()


# =============================================================================
# File Fixtures
# =============================================================================

@pytest.fixture
def person_ttl_file(tmp_path):
    """A Turtle file holding person 1."""
    ttl_file = tmp_path / "person.ttl"
    ttl_file.write_text(PERSON_ONE_TTL, encoding='utf-8')
    return str(ttl_file)


@pytest.fixture
def membership_ttl_file(tmp_path):
    """A Turtle file holding membership 25."""
    ttl_file = tmp_path / "membership.ttl"
    ttl_file.write_text(PARTY_MEMBERSHIP_ONE_TTL, encoding='utf-8')
    return str(ttl_file)
