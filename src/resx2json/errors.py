"""Exception hierarchy for resx2json.

All conversion failures derive from ResxToJsonError so callers can catch
the whole family at the build-integration boundary. Filesystem failures
(OSError) are not wrapped and propagate unchanged.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "OutputFileNameError",
    "ResourceReadError",
    "ResxToJsonError",
    "UnsupportedValueError",
]


class ResxToJsonError(Exception):
    """Base exception for all resx2json errors."""


class ResourceReadError(ResxToJsonError):
    """Resource container could not be read.

    Raised for malformed XML, unexpected ResX headers, entries without a
    name, primitive values that do not convert, and broken file references.

    Attributes:
        path: Path of the resource file being read
    """

    def __init__(self, message: str, *, path: str | Path) -> None:
        """Initialize ResourceReadError.

        Args:
            message: Human-readable description of the failure
            path: Path of the resource file being read
        """
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")


class UnsupportedValueError(ResourceReadError):
    """Resource entry has a type that cannot be resolved without custom types.

    Only strings, primitives, null references, byte arrays and file
    references resolve. Serialized objects and arbitrary .NET types do not.

    Attributes:
        key: Name of the offending <data> entry
        type_name: Declared type or mimetype of the entry
    """

    def __init__(self, *, path: str | Path, key: str, type_name: str) -> None:
        """Initialize UnsupportedValueError.

        Args:
            path: Path of the resource file being read
            key: Name of the offending <data> entry
            type_name: Declared type or mimetype of the entry
        """
        self.key = key
        self.type_name = type_name
        super().__init__(
            f"cannot resolve value of '{key}' with type '{type_name}'",
            path=path,
        )


class OutputFileNameError(ResxToJsonError):
    """No output file name can be derived from a resource path.

    Example:
        "Strings..resx" leaves nothing after the first dot of its stem.
    """
