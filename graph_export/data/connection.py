"""
Neo4j driver and session helpers.
"""

from typing import Optional, Tuple

try:
    from neo4j import GraphDatabase
    NEO4J_AVAILABLE = True
except ImportError:
    NEO4J_AVAILABLE = False

from ..config import NEO4J_URI, NEO4J_AUTH, NEO4J_DATABASE


def get_driver(uri: str = NEO4J_URI, auth: Tuple[str, str] = NEO4J_AUTH):
    """
    Create a Neo4j driver.

    Args:
        uri: Bolt/Neo4j connection URI
        auth: (username, password) tuple

    Returns:
        neo4j.Driver instance; the caller is responsible for closing it
    """
    if not NEO4J_AVAILABLE:
        raise ImportError(
            "Neo4j driver not installed. Install it with 'pip install neo4j'."
        )

    return GraphDatabase.driver(uri, auth=auth)


def open_session(driver, database: Optional[str] = NEO4J_DATABASE):
    """Open a session on the configured database (server default when None)."""
    if database:
        return driver.session(database=database)
    return driver.session()


def verify_connection(session) -> None:
    """Run a trivial query so connection and auth problems surface early."""
    session.run("RETURN 1").consume()
