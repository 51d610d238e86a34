"""JSON output modules."""

from .writer import GraphEncoder, to_jsonable, write_graph_files, write_custom_analysis

__all__ = ['GraphEncoder', 'to_jsonable', 'write_graph_files', 'write_custom_analysis']
