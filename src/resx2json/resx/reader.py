"""ResX resource container reader.

Reads the XML resource format produced by Visual Studio and
ResXResourceWriter, resolving every <data> entry to a ResourceValue
using only built-in type resolution. No custom type resolution service
exists here: serialized objects and arbitrary .NET types are rejected
with UnsupportedValueError.

Components:
    ResxDataNode - Raw <data> element as found in the file
    parse_file_ref - Split a ResXFileRef value into its parts
    iter_data_nodes - Validate headers and yield raw data nodes
    resolve_node - Resolve one raw node to a ResourceValue
    read_resx - Read a whole file into a key -> value mapping

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import base64
import binascii
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from resx2json.constants import (
    MIMETYPE_BYTEARRAY,
    RESX_MIMETYPE,
    RESX_READER_TYPE,
    RESX_WRITER_TYPE,
    TYPE_FILE_REF,
    TYPE_NULL_REF,
    TYPE_STRING,
)
from resx2json.errors import ResourceReadError, UnsupportedValueError
from resx2json.resx.values import (
    PRIMITIVE_CONVERTERS,
    ResourceValue,
    base_type_name,
    convert_primitive,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = [
    "ResxDataNode",
    "iter_data_nodes",
    "parse_file_ref",
    "read_resx",
    "resolve_node",
]

logger = logging.getLogger(__name__)

# Text file references without an explicit encoding.
_DEFAULT_FILE_REF_ENCODING = "utf-8-sig"


@dataclass(frozen=True, slots=True)
class ResxDataNode:
    """A <data> element before value resolution.

    Attributes:
        name: Resource key (the ``name`` attribute)
        value: Text of the <value> child, None if the child is missing
        type_name: The ``type`` attribute, None for plain strings
        mimetype: The ``mimetype`` attribute, None if absent
        comment: Text of the <comment> child, None if absent
    """

    name: str
    value: str | None = None
    type_name: str | None = None
    mimetype: str | None = None
    comment: str | None = None


def _child_text(element: ET.Element, tag: str) -> str | None:
    child = element.find(tag)
    if child is None:
        return None
    return child.text or ""


def parse_file_ref(text: str) -> tuple[str, str, str | None]:
    """Split a ResXFileRef value into file name, type name and encoding.

    The value has the form ``path;type[;encoding]``. A path containing
    semicolons is wrapped in double quotes.

    Args:
        text: Text of the <value> element

    Returns:
        Tuple of (file name, assembly-qualified type name, encoding or None)

    Raises:
        ValueError: If the value has no type part

    Example:
        >>> parse_file_ref("logo.png;System.Byte[], mscorlib")
        ('logo.png', 'System.Byte[], mscorlib', None)
        >>> parse_file_ref("notes.txt;System.String, mscorlib;utf-16")
        ('notes.txt', 'System.String, mscorlib', 'utf-16')
    """
    text = text.strip()
    if text.startswith('"'):
        end = text.find('"', 1)
        if end == -1:
            msg = f"unterminated quoted file name in '{text}'"
            raise ValueError(msg)
        file_name = text[1:end]
        rest = text[end + 1 :].lstrip()
        if not rest.startswith(";"):
            msg = f"missing type name in file reference '{text}'"
            raise ValueError(msg)
        parts = rest[1:].split(";")
    else:
        file_name, sep, remainder = text.partition(";")
        if not sep:
            msg = f"missing type name in file reference '{text}'"
            raise ValueError(msg)
        parts = remainder.split(";")

    type_name = parts[0].strip()
    if not file_name or not type_name:
        msg = f"incomplete file reference '{text}'"
        raise ValueError(msg)
    encoding = None
    if len(parts) > 1:
        encoding = parts[1].strip() or None
    return file_name, type_name, encoding


def _check_headers(root: ET.Element, path: Path) -> None:
    for header in root.iter("resheader"):
        name = header.get("name")
        value = (_child_text(header, "value") or "").strip()
        if name == "resmimetype" and value != RESX_MIMETYPE:
            msg = f"unsupported resmimetype '{value}', expected '{RESX_MIMETYPE}'"
            raise ResourceReadError(msg, path=path)
        if name == "reader" and base_type_name(value) != RESX_READER_TYPE:
            msg = f"unsupported reader '{value}'"
            raise ResourceReadError(msg, path=path)
        if name == "writer" and base_type_name(value) != RESX_WRITER_TYPE:
            msg = f"unsupported writer '{value}'"
            raise ResourceReadError(msg, path=path)


def iter_data_nodes(path: str | Path) -> Iterator[ResxDataNode]:
    """Parse a ResX file and yield its <data> nodes in document order.

    <metadata>, <assembly> and schema elements are skipped.

    Raises:
        ResourceReadError: If the XML is malformed, the root element is not
            <root>, a header names another format, or a <data> element has
            no name
        OSError: If the file cannot be read
    """
    path = Path(path)
    try:
        tree = ET.parse(path)
    except ET.ParseError as e:
        msg = f"malformed resource XML: {e}"
        raise ResourceReadError(msg, path=path) from e

    root = tree.getroot()
    if root.tag != "root":
        msg = f"expected <root> element, found <{root.tag}>"
        raise ResourceReadError(msg, path=path)
    _check_headers(root, path)

    for index, element in enumerate(root.findall("data")):
        name = element.get("name")
        if not name:
            msg = f"<data> element #{index + 1} has no name"
            raise ResourceReadError(msg, path=path)
        yield ResxDataNode(
            name=name,
            value=_child_text(element, "value"),
            type_name=element.get("type"),
            mimetype=element.get("mimetype"),
            comment=_child_text(element, "comment"),
        )


def _resolve_file_ref(node: ResxDataNode, base_dir: Path, path: Path) -> ResourceValue:
    if node.value is None:
        msg = f"file reference '{node.name}' has no value"
        raise ResourceReadError(msg, path=path)
    try:
        file_name, target_type, encoding = parse_file_ref(node.value)
    except ValueError as e:
        raise ResourceReadError(str(e), path=path) from e

    target = base_dir / file_name.replace("\\", "/")
    try:
        data = target.read_bytes()
    except OSError as e:
        msg = f"cannot read file reference '{node.name}' ({target}): {e}"
        raise ResourceReadError(msg, path=path) from e

    if base_type_name(target_type) != TYPE_STRING:
        return data
    try:
        return data.decode(encoding or _DEFAULT_FILE_REF_ENCODING)
    except (LookupError, UnicodeDecodeError) as e:
        msg = f"cannot decode file reference '{node.name}' ({target}): {e}"
        raise ResourceReadError(msg, path=path) from e


def resolve_node(node: ResxDataNode, *, path: str | Path) -> ResourceValue:
    """Resolve a raw data node to its value.

    Args:
        node: Raw node from iter_data_nodes
        path: Path of the .resx file; file references resolve against
            its directory

    Returns:
        Resolved value

    Raises:
        UnsupportedValueError: If the node's type needs custom type resolution
        ResourceReadError: If the node's text does not match its declared type
    """
    path = Path(path)

    if node.mimetype is not None:
        if node.mimetype != MIMETYPE_BYTEARRAY:
            raise UnsupportedValueError(path=path, key=node.name, type_name=node.mimetype)
        try:
            return base64.b64decode(node.value or "")
        except binascii.Error as e:
            msg = f"invalid base64 in '{node.name}': {e}"
            raise ResourceReadError(msg, path=path) from e

    type_name = base_type_name(node.type_name) if node.type_name else TYPE_STRING
    if type_name == TYPE_STRING:
        return node.value
    if type_name == TYPE_NULL_REF:
        return None
    if type_name == TYPE_FILE_REF:
        return _resolve_file_ref(node, path.parent, path)
    if type_name not in PRIMITIVE_CONVERTERS:
        raise UnsupportedValueError(path=path, key=node.name, type_name=node.type_name or "")
    if node.value is None:
        return None
    try:
        return convert_primitive(type_name, node.value)
    except ValueError as e:
        msg = f"invalid {type_name} value for '{node.name}': {e}"
        raise ResourceReadError(msg, path=path) from e


def read_resx(path: str | Path) -> dict[str, ResourceValue]:
    """Read every entry of a ResX file.

    Duplicate names keep the last value, like ResXResourceReader.

    Args:
        path: Path to the .resx file

    Returns:
        Mapping of resource key to resolved value, in document order

    Raises:
        ResourceReadError: If the file or one of its entries cannot be read
        OSError: If the file cannot be opened
    """
    entries: dict[str, ResourceValue] = {}
    for node in iter_data_nodes(path):
        if node.name in entries:
            logger.debug("Duplicate resource '%s' in %s, keeping last value", node.name, path)
        entries[node.name] = resolve_node(node, path=path)
    logger.debug("Read %d resources from %s", len(entries), path)
    return entries
