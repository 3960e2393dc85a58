"""
Tests for the statements mapper (formats/rdf/statements_mapper.py).
"""

import pytest

from rdflib import RDF, BNode, Graph, Literal

from formats.rdf import InvalidIdentifierError, StatementsMapper, find_record, map_statements
from fixtures import SCHEMA, add_person, build_party_membership_graph, entity


@pytest.mark.unit
class TestStatementsMapper:
    """Test mapping graphs into attribute records."""

    def test_one_record_per_subject(self, people_graph):
        """Test that two people give two records."""
        records = map_statements(people_graph)

        assert len(records) == 2
        assert [record.id for record in records] == ['1', '2']

    def test_attributes(self, people_graph):
        """Test the mapped attributes of Arya."""
        arya = find_record(map_statements(people_graph), '2')

        assert arya is not None
        assert arya['forename'] == 'Arya'
        assert arya.attributes == {
            'type': 'DummyPerson',
            'forename': 'Arya',
            'surname': 'Stark',
        }
        assert arya.subject == entity('2')

    def test_record_graph_holds_own_triples(self, people_graph):
        """Test that each record's graph can be queried for its own statements."""
        arya = find_record(map_statements(people_graph), '2')

        surnames = list(arya.graph.objects(None, SCHEMA.surname))
        assert [str(surname) for surname in surnames] == ['Stark']

    def test_record_graph_excludes_other_subjects(self, people_graph):
        """Test that no record graph leaks another subject's triples."""
        for record in map_statements(people_graph):
            assert len(record.graph) == 3
            assert set(record.graph.subjects()) == {record.subject}

    def test_union_of_record_graphs_is_input(self, people_graph):
        """Test that record graphs partition the input."""
        records = map_statements(people_graph)

        union = set()
        for record in records:
            union |= set(record.graph)
        assert union == set(people_graph)

    def test_uri_objects_become_local_ids(self):
        """Test that references to other entities map to their local id."""
        records = map_statements(build_party_membership_graph())

        membership = find_record(records, '25')
        assert membership['partyMembershipHasParty'] == '23'
        assert membership['type'] == 'DummyPartyMembership'

    def test_literal_values_are_lexical_strings(self):
        """Test that typed literals map to their lexical form."""
        membership = find_record(map_statements(build_party_membership_graph()), '25')

        assert membership['partyMembershipStartDate'] == '1953-01-12'
        assert membership['partyMembershipEndDate'] == '1954-01-12'

    def test_repeated_predicate_last_in_canonical_order_wins(self):
        """Test the multi-valued predicate policy."""
        graph = add_person(Graph(), '1', 'Daenerys', 'Targaryen')
        graph.add((entity('1'), SCHEMA.forename, Literal('Dany')))

        record = map_statements(graph)[0]

        # Sorted order puts "Daenerys" before "Dany"
        assert record['forename'] == 'Dany'
        assert len(list(record.graph.objects(entity('1'), SCHEMA.forename))) == 2

    def test_result_independent_of_insertion_order(self, people_graph):
        """Test that records depend only on the graph's triples."""
        reordered = Graph()
        for triple in reversed(sorted(people_graph)):
            reordered.add(triple)

        first = [(r.id, r.attributes) for r in map_statements(people_graph)]
        second = [(r.id, r.attributes) for r in map_statements(reordered)]
        assert first == second

    def test_empty_graph(self):
        """Test that an empty graph maps to no records."""
        assert map_statements(Graph()) == []

    def test_input_not_modified(self, people_graph):
        """Test that mapping leaves the input graph untouched."""
        before = set(people_graph)
        map_statements(people_graph)
        assert set(people_graph) == before

    def test_blank_node_subject_rejected(self):
        """Test that blank node subjects raise InvalidIdentifierError."""
        graph = Graph()
        graph.add((BNode(), RDF.type, SCHEMA.DummyPerson))

        with pytest.raises(InvalidIdentifierError):
            StatementsMapper.map(graph)

    def test_to_dict(self, people_graph):
        """Test the JSON-friendly record representation."""
        arya = find_record(map_statements(people_graph), '2')

        data = arya.to_dict()
        assert data['id'] == '2'
        assert data['attributes']['forename'] == 'Arya'
        assert data['subject'] == 'http://id.example.com/2'
        assert 'graph' not in data
        assert 'Stark' in arya.to_dict(include_graph=True)['graph']

    def test_to_dict_keeps_colliding_predicates(self):
        """Test that predicates named 'id' and 'subject' do not clobber record fields."""
        graph = Graph()
        graph.add((entity('7'), SCHEMA['id'], Literal('external-42')))
        graph.add((entity('7'), SCHEMA.subject, Literal('History')))

        data = map_statements(graph)[0].to_dict()

        assert data['id'] == '7'
        assert data['subject'] == 'http://id.example.com/7'
        assert data['attributes'] == {'id': 'external-42', 'subject': 'History'}


@pytest.mark.unit
class TestFindRecord:
    """Test the find_record helper."""

    def test_missing_record(self, people_graph):
        assert find_record(map_statements(people_graph), '99') is None
