"""Neo4j connection and extraction modules."""

from .connection import get_driver, open_session, verify_connection
from .nodes import export_nodes, node_from_record, pick_label, node_id
from .links import export_links, link_from_record

__all__ = [
    'get_driver', 'open_session', 'verify_connection',
    'export_nodes', 'node_from_record', 'pick_label', 'node_id',
    'export_links', 'link_from_record',
]
