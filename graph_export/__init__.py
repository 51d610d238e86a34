"""
neo4j-graph-export - Neo4j to D3 force-graph JSON exporter

Pulls nodes and relationships out of a Neo4j database with fixed Cypher
queries and writes them as a nodes/links JSON document for browser-side
graph visualisation, plus a couple of canned analysis queries.
"""

__version__ = "1.0.0"
__author__ = "Graph Export Team"
