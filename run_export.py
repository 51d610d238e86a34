#!/usr/bin/env python3
"""
Neo4j Graph Export Entry Point

Export nodes and relationships from Neo4j to data/graph-data.json.

Usage:
    python run_export.py --uri bolt://localhost:7687 --output_dir data/
"""

import sys

from graph_export.pipeline import main

if __name__ == "__main__":
    sys.exit(main())
