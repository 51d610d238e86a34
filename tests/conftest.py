"""
Shared pytest fixtures for the graph export test suite.
"""

import pytest
from unittest.mock import MagicMock

from graph_export.data.nodes import NODE_QUERY
from graph_export.data.links import LINK_QUERY


@pytest.fixture
def node_rows():
    """
    Rows shaped like NODE_QUERY results.

    Covers every branch of the label priority plus a node without labels.
    """
    return [
        {"nodeId": 0, "labels": ["Person"], "properties": {"name": "Alice", "title": "Dr"}},
        {"nodeId": 1, "labels": ["Person", "Employee"], "properties": {"name": "Bob"}},
        {"nodeId": 2, "labels": ["Movie"], "properties": {"title": "Heat", "released": 1995}},
        {"nodeId": 3, "labels": ["Tag"], "properties": {"label": "thriller"}},
        {"nodeId": 4, "labels": ["Item"], "properties": {"id": 42}},
        {"nodeId": 5, "labels": [], "properties": {}},
    ]


@pytest.fixture
def link_rows():
    """Rows shaped like LINK_QUERY results."""
    return [
        {"sourceId": 0, "targetId": 1, "relationshipType": "KNOWS", "properties": {"since": 2010}},
        {"sourceId": 0, "targetId": 2, "relationshipType": "ACTED_IN", "properties": {"role": "Lead"}},
        {"sourceId": 1, "targetId": 2, "relationshipType": "ACTED_IN", "properties": {}},
        {"sourceId": 2, "targetId": 3, "relationshipType": "TAGGED", "properties": {}},
    ]


@pytest.fixture
def sample_nodes():
    """Node records as produced by export_nodes."""
    return [
        {"id": "node_0", "label": "Alice", "type": "Person", "properties": {"name": "Alice"}, "neo4jId": "0"},
        {"id": "node_1", "label": "Bob", "type": "Person", "properties": {"name": "Bob"}, "neo4jId": "1"},
        {"id": "node_2", "label": "Heat", "type": "Movie", "properties": {"title": "Heat"}, "neo4jId": "2"},
    ]


@pytest.fixture
def sample_links():
    """Link records as produced by export_links; one points outside sample_nodes."""
    return [
        {"source": "node_0", "target": "node_1", "type": "KNOWS", "properties": {}},
        {"source": "node_0", "target": "node_2", "type": "ACTED_IN", "properties": {"role": "Lead"}},
        {"source": "node_1", "target": "node_2", "type": "ACTED_IN", "properties": {}},
        {"source": "node_2", "target": "node_9", "type": "TAGGED", "properties": {}},
    ]


@pytest.fixture
def fake_session(node_rows, link_rows):
    """
    A MagicMock session whose run() answers the node and link queries
    with the row fixtures and anything else with a MagicMock result.
    """
    session = MagicMock()

    def run(query, **params):
        if query == NODE_QUERY:
            return list(node_rows)
        if query == LINK_QUERY:
            return list(link_rows)
        return MagicMock()

    session.run.side_effect = run
    return session


@pytest.fixture
def mock_driver(fake_session):
    """A MagicMock driver whose session() context manager yields fake_session."""
    driver = MagicMock()
    driver.session.return_value.__enter__ = MagicMock(return_value=fake_session)
    driver.session.return_value.__exit__ = MagicMock(return_value=False)
    return driver


@pytest.fixture
def tmp_output_dir(tmp_path):
    """Empty output directory under tmp_path for the JSON writers."""
    output_dir = tmp_path / "test_output"
    output_dir.mkdir()
    return output_dir
