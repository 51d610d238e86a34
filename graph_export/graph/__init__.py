"""Export document assembly and graph views."""

from .document import build_export_document, count_types, print_export_summary
from .networkx_view import to_networkx, find_dangling_links

__all__ = [
    'build_export_document', 'count_types', 'print_export_summary',
    'to_networkx', 'find_dangling_links',
]
