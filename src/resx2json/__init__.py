"""resx2json - ResX localization resources to JSON for client-side code.

A build step that reads .NET ResX resource files, infers each file's
culture from its name, and writes one JSON document per file with the
resource strings plus culture metadata and a build stamp.

Public API:
    convert_resources - Convert a list of resource files in one call
    ResourceConverter - Reusable converter bound to a ConverterConfig
    ConverterConfig - Project, output and assembly settings
    BuildStamp - Build generation marker shared by one run
    ConversionResult - Success flag, progress messages and written files
    parse_culture - Culture segment to CultureTag (or None)
    read_resx - Read a ResX file into a key -> value mapping

Exceptions:
    ResxToJsonError - Base exception class
    ResourceReadError - Unreadable resource container or entry
    UnsupportedValueError - Entry type needs custom type resolution
    OutputFileNameError - No output file name can be derived

Submodules:
    resx2json.resx - ResX reader and value types
    resx2json.conversion - Naming, documents and the conversion run
    resx2json.cli - Command-line build adapter
"""

from .config import ConverterConfig
from .conversion import (
    BuildStamp,
    ConversionResult,
    ConvertedFile,
    ResourceConverter,
    convert_resources,
)
from .errors import (
    OutputFileNameError,
    ResourceReadError,
    ResxToJsonError,
    UnsupportedValueError,
)
from .locale_utils import CultureTag, parse_culture
from .resx import read_resx

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("resx2json")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BuildStamp",
    "ConversionResult",
    "ConvertedFile",
    "ConverterConfig",
    "CultureTag",
    "OutputFileNameError",
    "ResourceConverter",
    "ResourceReadError",
    "ResxToJsonError",
    "UnsupportedValueError",
    "__version__",
    "convert_resources",
    "parse_culture",
    "read_resx",
]
