"""File-name rules for resource conversion.

Resource files are named ``<Prefix>.<Name>[.<culture>].resx``. The output
file drops the leading segment, and the culture is the last segment
before the extension:

    Resources.Strings.en-US.resx -> Strings.en-US.json, culture "en-US"
    Strings.en-US.resx           -> en-US.json,         culture "en-US"
    Strings.resx                 -> Strings.json,       no culture

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from pathlib import PurePath, PureWindowsPath

from resx2json.constants import JSON_EXTENSION
from resx2json.errors import OutputFileNameError

__all__ = [
    "culture_segment",
    "output_file_name",
    "resource_stem",
]


def resource_stem(resource_path: str | PurePath) -> str:
    """Return the base name of a resource path without its extension.

    Both ``/`` and ``\\`` are treated as separators, since build files
    written on Windows list items with backslashes.

    Example:
        >>> resource_stem("Properties\\\\Resources.en-US.resx")
        'Resources.en-US'
    """
    return PureWindowsPath(str(resource_path)).stem


def output_file_name(resource_path: str | PurePath) -> str:
    """Derive the JSON file name for a resource file.

    Everything up to and including the first dot of the stem is dropped.
    A stem without dots is used whole.

    Raises:
        OutputFileNameError: If the resulting name would be empty
    """
    stem = resource_stem(resource_path)
    _, sep, rest = stem.partition(".")
    name = rest if sep else stem
    if not name:
        msg = f"cannot derive an output file name from '{resource_path}'"
        raise OutputFileNameError(msg)
    return name + JSON_EXTENSION


def culture_segment(resource_path: str | PurePath) -> str:
    """Return the culture segment of a resource file name.

    Returns an empty string when the stem has no dot.

    Example:
        >>> culture_segment("Strings.de-DE.resx")
        'de-DE'
        >>> culture_segment("Strings.resx")
        ''
    """
    stem = resource_stem(resource_path)
    _, sep, segment = stem.rpartition(".")
    return segment if sep else ""
