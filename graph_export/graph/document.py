"""
Assembly of the nodes/links export document and its console summary.
"""

import datetime
from typing import Any, Dict, List, Optional

import pandas as pd

from .networkx_view import find_dangling_links


def _iso_timestamp(moment: datetime.datetime) -> str:
    """UTC ISO-8601 timestamp with millisecond precision and a Z suffix."""
    moment = moment.astimezone(datetime.timezone.utc)
    return moment.strftime('%Y-%m-%dT%H:%M:%S.') + f"{moment.microsecond // 1000:03d}Z"


def distinct_types(records: List[Dict[str, Any]]) -> List[str]:
    """Distinct `type` values in order of first appearance."""
    return list(dict.fromkeys(r['type'] for r in records))


def build_export_document(
    nodes: List[Dict[str, Any]],
    links: List[Dict[str, Any]],
    export_date: Optional[datetime.datetime] = None
) -> Dict[str, Any]:
    """
    Combine node and link records into the export document.

    Args:
        nodes: Node records, in query order
        links: Link records, in query order
        export_date: Timestamp to stamp the export with (defaults to now)

    Returns:
        Dict with 'nodes', 'links' and 'metadata' keys
    """
    if export_date is None:
        export_date = datetime.datetime.now(datetime.timezone.utc)

    return {
        'nodes': nodes,
        'links': links,
        'metadata': {
            'exportDate': _iso_timestamp(export_date),
            'totalNodes': len(nodes),
            'totalLinks': len(links),
            'nodeTypes': distinct_types(nodes),
            'relationshipTypes': distinct_types(links),
        },
    }


def count_types(records: List[Dict[str, Any]]) -> Dict[str, int]:
    """
    Count records per `type`.

    Returns:
        Mapping of type to count, in order of first appearance
    """
    if not records:
        return {}

    counts = pd.Series([r['type'] for r in records]).value_counts(sort=False)
    return {str(k): int(v) for k, v in counts.items()}


def print_export_summary(document: Dict[str, Any]) -> None:
    """Print totals and per-type counts for an export document."""
    nodes = document['nodes']
    links = document['links']

    print("\n  Export Summary:")
    print(f"  Total Nodes: {len(nodes)}")
    print(f"  Total Relationships: {len(links)}")

    print("\n  Node Types:")
    for node_type, count in count_types(nodes).items():
        print(f"    {node_type}: {count}")

    print("\n  Relationship Types:")
    for rel_type, count in count_types(links).items():
        print(f"    {rel_type}: {count}")

    dangling = find_dangling_links(document)
    if dangling:
        print(f"\n  WARNING: {len(dangling)} links reference nodes outside the export.")
