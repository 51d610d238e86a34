"""
JSON writers for the export document and the custom analysis results.
"""

import os
import math
import json
import datetime
from typing import Any, Dict, Tuple

import numpy as np

try:
    from neo4j.graph import Node, Relationship, Path
    from neo4j.spatial import Point
    from neo4j.time import Date, Time, DateTime, Duration
    NEO4J_AVAILABLE = True
except ImportError:
    NEO4J_AVAILABLE = False

from ..config import DATA_DIR, GRAPH_DATA_FILE, GRAPH_DATA_MIN_FILE, CUSTOM_ANALYSIS_FILE


def _convert_value(obj):
    """Convert a single driver, numpy or non-finite value; other values pass through."""
    if NEO4J_AVAILABLE:
        # Duration and Point are tuples, so they must be caught before
        # the encoder sees them as plain sequences
        if isinstance(obj, (Date, Time, DateTime, Duration)):
            return obj.iso_format()
        if isinstance(obj, Point):
            return {'srid': obj.srid, 'coordinates': list(obj)}
        if isinstance(obj, Node):
            return {
                'id': obj.element_id,
                'labels': sorted(obj.labels),
                'properties': dict(obj.items()),
            }
        if isinstance(obj, Relationship):
            return {
                'id': obj.element_id,
                'type': obj.type,
                'start': obj.start_node.element_id,
                'end': obj.end_node.element_id,
                'properties': dict(obj.items()),
            }
        if isinstance(obj, Path):
            return {
                'nodes': list(obj.nodes),
                'relationships': list(obj.relationships),
            }
    if isinstance(obj, (datetime.datetime, datetime.date, datetime.time)):
        return obj.isoformat()
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        obj = float(obj)
    if isinstance(obj, float) and not math.isfinite(obj):
        return None
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, (bytes, bytearray)):
        return obj.hex()
    return obj


def to_jsonable(obj: Any) -> Any:
    """
    Recursively convert a value into something json can encode strictly.

    Neo4j temporal values become ISO strings, points become
    {srid, coordinates} mappings, graph objects become mappings, and
    NaN/Infinity become None so the output stays valid JSON.
    """
    obj = _convert_value(obj)

    if isinstance(obj, dict):
        return {key: to_jsonable(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple, set, frozenset)):
        return [to_jsonable(value) for value in obj]
    return obj


class GraphEncoder(json.JSONEncoder):
    """Custom encoder for Neo4j driver values and numpy types."""

    def iterencode(self, o, _one_shot=False):
        return super(GraphEncoder, self).iterencode(to_jsonable(o), _one_shot)


def _write_json(data: Any, file_path: str, **kwargs) -> None:
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, cls=GraphEncoder, ensure_ascii=False, allow_nan=False, **kwargs)


def write_graph_files(
    document: Dict[str, Any],
    output_dir: str = DATA_DIR
) -> Tuple[str, str]:
    """
    Write the export document as pretty and minified JSON.

    Args:
        document: Export document
        output_dir: Directory to write into (created if missing)

    Returns:
        Tuple of (pretty_path, minified_path)
    """
    os.makedirs(output_dir, exist_ok=True)

    pretty_path = os.path.join(output_dir, GRAPH_DATA_FILE)
    _write_json(document, pretty_path, indent=2)
    print(f"  Data exported to {pretty_path}")

    min_path = os.path.join(output_dir, GRAPH_DATA_MIN_FILE)
    _write_json(document, min_path, separators=(',', ':'))
    print(f"  Minified data exported to {min_path}")

    return pretty_path, min_path


def write_custom_analysis(
    results: Dict[str, Any],
    output_dir: str = DATA_DIR
) -> str:
    """Write custom query results as pretty JSON and return the file path."""
    os.makedirs(output_dir, exist_ok=True)

    file_path = os.path.join(output_dir, CUSTOM_ANALYSIS_FILE)
    _write_json(results, file_path, indent=2)
    print(f"  Custom analysis saved to {file_path}")

    return file_path
