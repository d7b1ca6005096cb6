"""ResX resource reading.

Submodules:
    values - ResourceValue closed variant and JSON serialization rules
    reader - XML reader resolving <data> entries to ResourceValue

Python 3.13+. Zero external dependencies.
"""

from resx2json.resx.reader import (
    ResxDataNode,
    iter_data_nodes,
    parse_file_ref,
    read_resx,
    resolve_node,
)
from resx2json.resx.values import (
    JsonValue,
    ResourceValue,
    classify_value,
    to_json_value,
)

__all__ = [
    "JsonValue",
    "ResourceValue",
    "ResxDataNode",
    "classify_value",
    "iter_data_nodes",
    "parse_file_ref",
    "read_resx",
    "resolve_node",
    "to_json_value",
]
