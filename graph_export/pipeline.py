"""
Main export pipeline: Neo4j -> nodes/links JSON + custom analysis.
"""

import sys
import signal
import argparse
from typing import Any, Dict, List, Optional, Tuple

from .config import (
    DATA_DIR, NODE_LIMIT, LINK_LIMIT,
    NEO4J_URI, NEO4J_AUTH, NEO4J_DATABASE,
)
from .data import get_driver, open_session, verify_connection, export_nodes, export_links
from .graph import build_export_document, print_export_summary
from .output import write_graph_files
from .analysis import export_with_custom_queries

# Driver of the run in progress, closed by the SIGINT handler
_active_driver = None


def export_graph_data(
    driver,
    output_dir: str = DATA_DIR,
    node_limit: int = NODE_LIMIT,
    link_limit: int = LINK_LIMIT,
    database: Optional[str] = NEO4J_DATABASE
) -> Dict[str, Any]:
    """
    Export nodes and relationships to graph-data.json and graph-data.min.json.

    Args:
        driver: Open Neo4j driver
        output_dir: Directory for the JSON files
        node_limit: Maximum number of nodes to export
        link_limit: Maximum number of relationships to export
        database: Database name (server default when None)

    Returns:
        The export document

    Raises:
        Any connection, query or I/O error, after reporting it
    """
    try:
        with open_session(driver, database) as session:
            print("  Connecting to Neo4j database...")
            verify_connection(session)
            print("  Connected successfully!")

            nodes = export_nodes(session, limit=node_limit)
            links = export_links(session, limit=link_limit)

        document = build_export_document(nodes, links)
        write_graph_files(document, output_dir)
        print_export_summary(document)

        return document

    except Exception as e:
        print(f"  Error exporting data: {e}")
        raise


def run_export(
    uri: str = NEO4J_URI,
    auth: Tuple[str, str] = NEO4J_AUTH,
    output_dir: str = DATA_DIR,
    node_limit: int = NODE_LIMIT,
    link_limit: int = LINK_LIMIT,
    database: Optional[str] = NEO4J_DATABASE,
    skip_custom: bool = False
) -> Dict[str, Any]:
    """
    Run the complete export: graph data first, then the custom queries.

    The driver is closed whatever happens.
    """
    global _active_driver

    print("=" * 60)
    print("  NEO4J GRAPH EXPORT")
    print("=" * 60)

    driver = get_driver(uri, auth)
    _active_driver = driver

    try:
        document = export_graph_data(
            driver,
            output_dir=output_dir,
            node_limit=node_limit,
            link_limit=link_limit,
            database=database
        )

        if not skip_custom:
            export_with_custom_queries(driver, output_dir, database)

        print("\n  Export completed successfully!")
        return document

    finally:
        driver.close()
        _active_driver = None


def _handle_sigint(signum, frame):
    """Close the active driver and exit cleanly on Ctrl+C."""
    print("\n  Shutting down gracefully...")
    if _active_driver is not None:
        _active_driver.close()
    sys.exit(0)


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        description='Export a Neo4j graph to nodes/links JSON for visualisation'
    )
    parser.add_argument(
        '--uri', type=str,
        default=NEO4J_URI,
        help='Neo4j connection URI'
    )
    parser.add_argument(
        '--user', type=str,
        default=NEO4J_AUTH[0],
        help='Neo4j username'
    )
    parser.add_argument(
        '--password', type=str,
        default=NEO4J_AUTH[1],
        help='Neo4j password'
    )
    parser.add_argument(
        '--database', type=str,
        default=NEO4J_DATABASE,
        help='Neo4j database name (server default if omitted)'
    )
    parser.add_argument(
        '--output_dir', type=str,
        default=DATA_DIR,
        help='Output directory for the JSON files'
    )
    parser.add_argument(
        '--node_limit', type=int,
        default=NODE_LIMIT,
        help='Maximum number of nodes to export'
    )
    parser.add_argument(
        '--link_limit', type=int,
        default=LINK_LIMIT,
        help='Maximum number of relationships to export'
    )
    parser.add_argument(
        '--skip_custom', action='store_true',
        help='Skip the custom analysis queries'
    )

    args = parser.parse_args(argv)

    signal.signal(signal.SIGINT, _handle_sigint)

    try:
        run_export(
            uri=args.uri,
            auth=(args.user, args.password),
            output_dir=args.output_dir,
            node_limit=args.node_limit,
            link_limit=args.link_limit,
            database=args.database,
            skip_custom=args.skip_custom
        )
    except Exception as e:
        print(f"\n  Export failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
