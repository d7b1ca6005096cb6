"""Output document assembly and JSON serialization.

An output document holds every entry of one resource file followed by
the reserved keys:

    lcid  - Windows locale identifier of the file's culture (0 if none)
    lang  - Canonical culture name ("" if none)
    r2jng - FILETIME of the build stamp, shared by the whole run

A resource key equal to a reserved key is replaced by the reserved
value.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from resx2json.constants import (
    BUILD_MARKER_KEY,
    LANG_KEY,
    LCID_KEY,
    LCID_NEUTRAL,
    RESERVED_KEYS,
)
from resx2json.resx.values import JsonValue, to_json_value

if TYPE_CHECKING:
    from collections.abc import Mapping

    from resx2json.conversion.stamp import BuildStamp
    from resx2json.locale_utils import CultureTag
    from resx2json.resx.values import ResourceValue

__all__ = [
    "OutputDocument",
    "build_document",
    "serialize_document",
]

logger = logging.getLogger(__name__)

type OutputDocument = dict[str, JsonValue]
"""JSON-ready mapping written for one resource file."""


def build_document(
    entries: Mapping[str, ResourceValue],
    culture: CultureTag | None,
    stamp: BuildStamp,
) -> OutputDocument:
    """Assemble the output document for one resource file.

    Args:
        entries: Resolved resource entries in document order
        culture: Culture parsed from the file name, None for neutral
        stamp: Build stamp of the current run

    Returns:
        Mapping of entries (JSON-ready) followed by lcid, lang and r2jng
    """
    document: OutputDocument = {key: to_json_value(value) for key, value in entries.items()}

    for key in RESERVED_KEYS:
        if key in document:
            logger.debug("Resource key '%s' is reserved and will be overwritten", key)
            del document[key]

    document[LCID_KEY] = culture.lcid if culture is not None else LCID_NEUTRAL
    document[LANG_KEY] = culture.name if culture is not None else ""
    document[BUILD_MARKER_KEY] = stamp.filetime
    return document


def serialize_document(document: OutputDocument, *, ensure_ascii: bool = False) -> str:
    """Serialize an output document to compact JSON text.

    Example:
        >>> serialize_document({"Hello": "World", "lcid": 0})
        '{"Hello":"World","lcid":0}'
    """
    return json.dumps(
        document,
        ensure_ascii=ensure_ascii,
        separators=(",", ":"),
        allow_nan=False,
    )
