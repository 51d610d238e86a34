"""
Configuration settings for the graph export.

Neo4j credentials and output locations are loaded from environment
variables.  Copy .env.example to .env and fill in your values, or export
them in your shell before running.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# ==================================================
# Directory Configuration
# ==================================================
# Relative to the directory the export is run from
DATA_DIR = os.environ.get('GRAPH_EXPORT_DATA_DIR') or os.path.join(os.getcwd(), 'data')

GRAPH_DATA_FILE = 'graph-data.json'
GRAPH_DATA_MIN_FILE = 'graph-data.min.json'
CUSTOM_ANALYSIS_FILE = 'custom-analysis.json'

# ==================================================
# Extraction Limits
# ==================================================
# Rows beyond these caps are silently dropped by the query LIMIT
NODE_LIMIT = int(os.environ.get('GRAPH_EXPORT_NODE_LIMIT') or '1000')
LINK_LIMIT = int(os.environ.get('GRAPH_EXPORT_LINK_LIMIT') or '5000')

# ==================================================
# Neo4j Configuration
# ==================================================
NEO4J_URI = os.environ.get('NEO4J_URI', 'bolt://localhost:7687')
NEO4J_AUTH = (
    os.environ.get('NEO4J_USERNAME', os.environ.get('NEO4J_USER', 'neo4j')),
    os.environ.get('NEO4J_PASSWORD', ''),
)
NEO4J_DATABASE = os.environ.get('NEO4J_DATABASE') or None
