"""Resource-to-JSON conversion pipeline.

Submodules:
    naming    - Output file name and culture segment derivation
    stamp     - BuildStamp build generation marker
    document  - Output document assembly and JSON serialization
    converter - ResourceConverter run loop and convert_resources shorthand

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from resx2json.conversion.converter import (
    ConversionResult,
    ConvertedFile,
    ResourceConverter,
    convert_resources,
)
from resx2json.conversion.document import OutputDocument, build_document, serialize_document
from resx2json.conversion.naming import culture_segment, output_file_name, resource_stem
from resx2json.conversion.stamp import BuildStamp

__all__ = [
    # Run
    "ResourceConverter",
    "convert_resources",
    "ConversionResult",
    "ConvertedFile",
    # Build marker
    "BuildStamp",
    # Documents
    "OutputDocument",
    "build_document",
    "serialize_document",
    # File names
    "culture_segment",
    "output_file_name",
    "resource_stem",
]
