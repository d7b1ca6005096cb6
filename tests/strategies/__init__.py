"""Hypothesis strategies for resx2json property-based testing.

Usage:
    from tests.strategies import resource_keys, resource_strings, string_tables
    from tests.strategies.resx import culture_segments, primitive_entries
"""

from .resx import (
    culture_segments,
    primitive_entries,
    resource_keys,
    resource_strings,
    string_tables,
)

__all__ = [
    "culture_segments",
    "primitive_entries",
    "resource_keys",
    "resource_strings",
    "string_tables",
]
