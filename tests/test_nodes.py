"""Tests for graph_export.data.nodes."""

import pytest
from unittest.mock import MagicMock

from graph_export.data.nodes import (
    NODE_QUERY,
    export_nodes,
    node_from_record,
    node_id,
    pick_label,
)


class TestPickLabel:
    """Label priority: name > title > label > id > type."""

    def test_name_wins(self):
        props = {"name": "Alice", "title": "Dr", "label": "x", "id": 1}
        assert pick_label(props, "Person") == "Alice"

    def test_title_before_label(self):
        assert pick_label({"title": "Heat", "label": "x", "id": 1}, "Movie") == "Heat"

    def test_label_before_id(self):
        assert pick_label({"label": "thriller", "id": 7}, "Tag") == "thriller"

    def test_id_is_stringified(self):
        assert pick_label({"id": 42}, "Item") == "42"

    def test_falls_back_to_type(self):
        assert pick_label({"other": "value"}, "Item") == "Item"

    def test_empty_values_are_skipped(self):
        assert pick_label({"name": "", "title": None, "label": "kept"}, "Tag") == "kept"

    def test_non_string_values_are_stringified(self):
        assert pick_label({"name": 123}, "Item") == "123"
        assert pick_label({"title": True}, "Item") == "True"
        assert pick_label({"label": ["a", "b"]}, "Item") == "['a', 'b']"

    def test_zero_id_falls_back_to_type(self):
        assert pick_label({"id": 0}, "Item") == "Item"


class TestNodeFromRecord:

    def test_full_record(self):
        record = {"nodeId": 12, "labels": ["Person", "Employee"], "properties": {"name": "Bob"}}
        node = node_from_record(record)

        assert node == {
            "id": "node_12",
            "label": "Bob",
            "type": "Person",
            "properties": {"name": "Bob"},
            "neo4jId": "12",
        }

    def test_no_labels_gives_unknown_type(self):
        node = node_from_record({"nodeId": 3, "labels": [], "properties": {}})
        assert node["type"] == "Unknown"
        assert node["label"] == "Unknown"

    def test_id_scheme_matches_node_id(self):
        node = node_from_record({"nodeId": 99, "labels": ["A"], "properties": {}})
        assert node["id"] == node_id(99) == node_id("99")


class TestExportNodes:

    def test_one_record_per_row(self, fake_session, node_rows):
        nodes = export_nodes(fake_session)
        assert len(nodes) == len(node_rows)
        assert [n["neo4jId"] for n in nodes] == [str(r["nodeId"]) for r in node_rows]

    def test_labels_follow_priority(self, fake_session):
        labels = [n["label"] for n in export_nodes(fake_session)]
        assert labels == ["Alice", "Bob", "Heat", "thriller", "42", "Unknown"]

    def test_default_limit_is_passed_to_query(self):
        session = MagicMock()
        session.run.return_value = []

        export_nodes(session)

        session.run.assert_called_once_with(NODE_QUERY, limit=1000)

    def test_custom_limit(self):
        session = MagicMock()
        session.run.return_value = []

        export_nodes(session, limit=10)

        session.run.assert_called_once_with(NODE_QUERY, limit=10)

    def test_query_error_propagates(self):
        session = MagicMock()
        session.run.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            export_nodes(session)
