"""
Relationship extraction: Neo4j relationships to link records.
"""

from typing import Any, Dict, List

from ..config import LINK_LIMIT
from .nodes import node_id

LINK_QUERY = """
MATCH (n)-[r]->(m)
RETURN
    id(startNode(r)) AS sourceId,
    id(endNode(r)) AS targetId,
    type(r) AS relationshipType,
    properties(r) AS properties
LIMIT $limit
"""


def link_from_record(record) -> Dict[str, Any]:
    """Map one row of LINK_QUERY to a link record."""
    return {
        'source': node_id(record['sourceId']),
        'target': node_id(record['targetId']),
        'type': record['relationshipType'],
        'properties': dict(record['properties'] or {}),
    }


def export_links(session, limit: int = LINK_LIMIT) -> List[Dict[str, Any]]:
    """
    Fetch up to `limit` relationships and convert them to link records.

    Query failures propagate to the caller.
    """
    print("  Exporting relationships...")
    result = session.run(LINK_QUERY, limit=limit)
    links = [link_from_record(record) for record in result]
    print(f"    Exported {len(links)} relationships")

    return links
