"""
Node extraction: Neo4j nodes to display-ready node records.
"""

from typing import Any, Dict, List

from ..config import NODE_LIMIT

NODE_QUERY = """
MATCH (n)
RETURN
    id(n) AS nodeId,
    labels(n) AS labels,
    properties(n) AS properties
LIMIT $limit
"""

UNKNOWN_TYPE = 'Unknown'

# Property keys tried, in order, for the display label
LABEL_KEYS = ('name', 'title', 'label')


def node_id(raw_id) -> str:
    """Format an internal Neo4j id the way node and link records reference it."""
    return f"node_{raw_id}"


def pick_label(properties: Dict[str, Any], node_type: str) -> str:
    """
    Choose a human readable label for a node.

    Priority is name, title, label, then the id property, falling back
    to the node type. Falsy values are skipped and the chosen value is
    returned as a string.

    Args:
        properties: Node property map
        node_type: Type used when no property qualifies

    Returns:
        Display label
    """
    for key in LABEL_KEYS:
        if properties.get(key):
            return str(properties[key])

    if properties.get('id'):
        return str(properties['id'])

    return node_type


def node_from_record(record) -> Dict[str, Any]:
    """Map one row of NODE_QUERY to a node record."""
    neo4j_id = str(record['nodeId'])
    labels = record['labels'] or []
    properties = dict(record['properties'] or {})

    node_type = labels[0] if len(labels) > 0 else UNKNOWN_TYPE

    return {
        'id': node_id(neo4j_id),
        'label': pick_label(properties, node_type),
        'type': node_type,
        'properties': properties,
        'neo4jId': neo4j_id,
    }


def export_nodes(session, limit: int = NODE_LIMIT) -> List[Dict[str, Any]]:
    """
    Fetch up to `limit` nodes and convert them to node records.

    Query failures propagate to the caller.
    """
    print("  Exporting nodes...")
    result = session.run(NODE_QUERY, limit=limit)
    nodes = [node_from_record(record) for record in result]
    print(f"    Exported {len(nodes)} nodes")

    return nodes
