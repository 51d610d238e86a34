"""
Canned analytical Cypher queries run after the main export.
"""

from typing import Any, Dict, List, Optional

from ..config import DATA_DIR, NEO4J_DATABASE
from ..data.connection import open_session
from ..output.writer import write_custom_analysis

# Customise these to match the data model being exported
CUSTOM_QUERIES: List[Dict[str, str]] = [
    {
        'name': 'high_degree_nodes',
        'query': """
            MATCH (n)
            WITH n, COUNT { (n)--() } AS degree
            WHERE degree > 5
            RETURN
                id(n) AS nodeId,
                labels(n) AS labels,
                properties(n) AS properties,
                degree
            ORDER BY degree DESC
            LIMIT 50
        """,
        'description': 'Nodes with high connectivity (>5 connections)',
    },
    {
        'name': 'central_paths',
        'query': """
            MATCH path = (a)-[*2..3]-(b)
            WHERE id(a) < id(b)
            WITH path, length(path) AS pathLength
            RETURN
                [node IN nodes(path) | {id: id(node), labels: labels(node)}] AS nodes,
                [rel IN relationships(path) | type(rel)] AS relationships,
                pathLength
            ORDER BY pathLength
            LIMIT 100
        """,
        'description': 'Important paths of length 2-3',
    },
]


def run_custom_queries(
    session,
    queries: List[Dict[str, str]] = CUSTOM_QUERIES
) -> Dict[str, Dict[str, Any]]:
    """
    Run each query and collect its rows as plain dicts.

    Args:
        session: Open Neo4j session
        queries: List of dicts with 'name', 'query' and 'description'

    Returns:
        Dict keyed by query name with 'description' and 'data' entries
    """
    results = {}

    for custom_query in queries:
        print(f"    Running: {custom_query['name']}")
        result = session.run(custom_query['query'])
        results[custom_query['name']] = {
            'description': custom_query['description'],
            'data': [record.data() for record in result],
        }

    return results


def export_with_custom_queries(
    driver,
    output_dir: str = DATA_DIR,
    database: Optional[str] = NEO4J_DATABASE
) -> Optional[Dict[str, Dict[str, Any]]]:
    """
    Run the custom queries and save their results.

    Failures are reported and swallowed so the main export still counts
    as successful.

    Returns:
        The results dict, or None if anything failed
    """
    print("\n  Running custom export queries...")

    try:
        with open_session(driver, database) as session:
            results = run_custom_queries(session)
        write_custom_analysis(results, output_dir)
        return results

    except Exception as e:
        print(f"  Error in custom export: {e}")
        return None
