"""Custom analytical queries."""

from .custom_queries import CUSTOM_QUERIES, run_custom_queries, export_with_custom_queries

__all__ = ['CUSTOM_QUERIES', 'run_custom_queries', 'export_with_custom_queries']
