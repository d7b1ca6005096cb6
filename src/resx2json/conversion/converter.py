"""Resource-to-JSON conversion run.

ResourceConverter processes resource files one at a time, in input
order. For each file it derives the output name and culture from the
file name, reads the entries, writes the JSON document to the output
directory and copies it into the project directory.

The first failure (unreadable resource, I/O error) propagates and stops
the run. Files written before the failure are left in place.

Python 3.13+.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from resx2json.config import ConverterConfig
from resx2json.constants import (
    MSG_FILE_GENERATED,
    MSG_FILE_STARTED,
    MSG_NO_RESOURCES,
    MSG_RUN_STARTED,
    OUTPUT_ENCODING,
)
from resx2json.conversion.document import build_document, serialize_document
from resx2json.conversion.naming import culture_segment, output_file_name
from resx2json.conversion.stamp import BuildStamp
from resx2json.locale_utils import CultureTag, parse_culture
from resx2json.resx.reader import read_resx

__all__ = [
    "ConversionResult",
    "ConvertedFile",
    "ResourceConverter",
    "convert_resources",
]

logger = logging.getLogger(__name__)

type ResourcePath = str | PathLike[str]
"""Resource file path as supplied by the build integration."""


@dataclass(frozen=True, slots=True)
class ConvertedFile:
    """Record of one converted resource file.

    Attributes:
        source: Resource file that was read
        output_file: JSON file written to the output directory
        project_file: Copy of output_file in the project directory
        culture: Culture parsed from the file name, None for neutral
        entry_count: Number of resource entries written (reserved keys excluded)
    """

    source: Path
    output_file: Path
    project_file: Path
    culture: CultureTag | None
    entry_count: int


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of a conversion run.

    ``success`` is False only when there was nothing to convert. Failures
    raise instead of returning a result.

    Attributes:
        success: True if at least one file was given and all were converted
        messages: Progress messages in emission order
        files: Converted files in input order
    """

    success: bool
    messages: tuple[str, ...]
    files: tuple[ConvertedFile, ...] = ()


class ResourceConverter:
    """Converts ResX resource files into JSON documents.

    Example:
        >>> config = ConverterConfig("/src/app", "wwwroot/i18n")
        >>> converter = ResourceConverter(config)
        >>> result = converter.run(["Resources.Strings.resx"], BuildStamp.now())
        >>> [f.output_file.name for f in result.files]
        ['Strings.json']
    """

    __slots__ = ("_config", "_on_message")

    def __init__(
        self,
        config: ConverterConfig,
        *,
        on_message: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize the converter.

        Args:
            config: Project, output and assembly settings
            on_message: Optional callback receiving each progress message,
                for build consoles that surface them as they happen
        """
        self._config = config
        self._on_message = on_message

    @property
    def config(self) -> ConverterConfig:
        """Configuration this converter writes with."""
        return self._config

    def _emit(self, messages: list[str], message: str) -> None:
        messages.append(message)
        logger.info("%s", message)
        if self._on_message is not None:
            self._on_message(message)

    def convert_file(self, resource_file: ResourcePath, stamp: BuildStamp) -> ConvertedFile:
        """Convert a single resource file.

        Args:
            resource_file: Path of the .resx file
            stamp: Build stamp written into the document

        Returns:
            Record of the written files

        Raises:
            OutputFileNameError: If no output name can be derived
            ResourceReadError: If the resource file cannot be parsed
            OSError: If reading, writing or copying fails
        """
        source = Path(resource_file)
        name = output_file_name(resource_file)
        culture = parse_culture(culture_segment(resource_file))

        entries = read_resx(source)
        document = build_document(entries, culture, stamp)
        content = serialize_document(document, ensure_ascii=self._config.ensure_ascii)

        output_file = self._config.output_dir / name
        output_file.write_bytes(content.encode(OUTPUT_ENCODING))

        project_file = self._config.project_dir / name
        if project_file.resolve() != output_file.resolve():
            shutil.copyfile(output_file, project_file)
        else:
            logger.debug("Output directory is the project directory, skipping copy of %s", name)

        return ConvertedFile(
            source=source,
            output_file=output_file,
            project_file=project_file,
            culture=culture,
            entry_count=len(entries),
        )

    def run(self, resource_files: Sequence[ResourcePath], stamp: BuildStamp) -> ConversionResult:
        """Convert every resource file in order.

        Args:
            resource_files: Resource file paths; an empty sequence converts
                nothing and returns an unsuccessful result with one message
            stamp: Build stamp shared by every document of this run

        Returns:
            ConversionResult with the progress messages and written files

        Raises:
            OutputFileNameError: If no output name can be derived for a file
            ResourceReadError: If a resource file cannot be parsed
            OSError: If reading, writing or copying fails
        """
        messages: list[str] = []
        if not resource_files:
            self._emit(messages, MSG_NO_RESOURCES)
            return ConversionResult(success=False, messages=tuple(messages))

        self._emit(messages, MSG_RUN_STARTED)
        files: list[ConvertedFile] = []
        for resource_file in resource_files:
            self._emit(messages, MSG_FILE_STARTED.format(path=resource_file))
            converted = self.convert_file(resource_file, stamp)
            files.append(converted)
            self._emit(messages, MSG_FILE_GENERATED.format(name=converted.output_file.name))

        logger.debug(
            "Converted %d resource files into %s", len(files), self._config.output_dir
        )
        return ConversionResult(success=True, messages=tuple(messages), files=tuple(files))


def convert_resources(
    resource_files: Sequence[ResourcePath],
    project_path: str | PathLike[str],
    output_path: str | PathLike[str],
    *,
    stamp: BuildStamp,
    assembly_name: str = "",
    on_message: Callable[[str], None] | None = None,
) -> ConversionResult:
    """Convert resource files with a one-off converter.

    Shorthand for ``ResourceConverter(ConverterConfig(...)).run(...)``.

    Example:
        >>> result = convert_resources(
        ...     ["Strings.resx"], "/src/app", "bin", stamp=BuildStamp.now()
        ... )
        >>> result.success
        True
    """
    config = ConverterConfig(project_path, output_path, assembly_name=assembly_name)
    return ResourceConverter(config, on_message=on_message).run(resource_files, stamp)
