"""Converter configuration.

Provides a single frozen dataclass carrying the invocation inputs the
build integration supplies: project root, output directory and assembly
name, plus JSON output options.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

__all__ = ["ConverterConfig"]


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    """Immutable configuration for ResourceConverter.

    Paths are stored as ``Path`` objects; strings are converted at
    construction time.

    Attributes:
        project_path: Project root directory. Every generated file is
            also copied here.
        output_path: Output directory, relative to project_path or absolute.
            Must already exist.
        assembly_name: Name of the assembly being built. Accepted for build
            integration parity; not part of output file names.
        ensure_ascii: Escape non-ASCII characters in the JSON output
            (default: False, UTF-8 text is written as is).

    Example:
        >>> config = ConverterConfig("/src/app", "wwwroot/i18n")
        >>> config.output_dir
        PosixPath('/src/app/wwwroot/i18n')
    """

    project_path: Path
    output_path: Path
    assembly_name: str = ""
    ensure_ascii: bool = False

    def __post_init__(self) -> None:
        """Normalize paths and validate values at construction time.

        Raises:
            ValueError: If project_path is empty
            TypeError: If a path is neither str nor PathLike
        """
        for name in ("project_path", "output_path"):
            value = getattr(self, name)
            if not isinstance(value, (str, PathLike)):
                msg = f"{name} must be str or PathLike, got {type(value).__name__}"
                raise TypeError(msg)
            if name == "project_path" and not str(value):
                msg = "project_path must not be empty"
                raise ValueError(msg)
            object.__setattr__(self, name, Path(value))

    @property
    def output_dir(self) -> Path:
        """Directory generated files are written to.

        An absolute output_path replaces the project root, as path joining does.
        """
        return self.project_path / self.output_path

    @property
    def project_dir(self) -> Path:
        """Directory generated files are mirrored into."""
        return self.project_path
