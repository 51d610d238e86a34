"""
NetworkX view of an export document.
"""

from typing import Any, Dict, List

import networkx as nx


def to_networkx(document: Dict[str, Any]) -> nx.MultiDiGraph:
    """
    Load an export document into a MultiDiGraph.

    Nodes keep their label, type, neo4jId and properties as attributes.
    Each link becomes one edge, so parallel
    relationships between the same pair are preserved.

    Args:
        document: Export document as built by build_export_document

    Returns:
        nx.MultiDiGraph
    """
    G = nx.MultiDiGraph()

    for node in document['nodes']:
        G.add_node(
            node['id'],
            label=node['label'],
            type=node['type'],
            neo4jId=node['neo4jId'],
            properties=node['properties'],
        )

    for link in document['links']:
        G.add_edge(
            link['source'], link['target'],
            type=link['type'],
            properties=link['properties'],
        )

    return G


def find_dangling_links(document: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Links whose source or target is not among the exported nodes.

    Nodes and links are capped independently, so a truncated export can
    contain links to nodes that were never written out. In the graph view
    those endpoints are bare nodes without a `type` attribute.
    """
    G = to_networkx(document)
    missing = {n for n, data in G.nodes(data=True) if 'type' not in data}

    return [
        link for link in document['links']
        if link['source'] in missing or link['target'] in missing
    ]
