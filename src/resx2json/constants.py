"""Shared constants for resx2json.

Centralizes the reserved document keys, build messages, and numeric
constants used across the reader, the conversion pipeline and the CLI.

Constants are grouped by domain:
- Reserved keys: Keys the converter adds to every output document
- Messages: Progress text emitted during a conversion run
- Time: Windows FILETIME epoch for the build marker
- Locale identifiers: LCID fallbacks and table overrides
- ResX: Header values and well-known type names

Python 3.13+. Zero external dependencies.
"""

from datetime import UTC, datetime

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Reserved keys
    "LCID_KEY",
    "LANG_KEY",
    "BUILD_MARKER_KEY",
    "RESERVED_KEYS",
    # Messages
    "MESSAGE_SOURCE",
    "MSG_NO_RESOURCES",
    "MSG_RUN_STARTED",
    "MSG_FILE_STARTED",
    "MSG_FILE_GENERATED",
    # Output
    "JSON_EXTENSION",
    "OUTPUT_ENCODING",
    # Time
    "FILETIME_EPOCH",
    "FILETIME_TICKS_PER_SECOND",
    # Locale identifiers
    "LCID_NEUTRAL",
    "LCID_CUSTOM_UNSPECIFIED",
    "LCID_PRIMARY_LANGUAGE_MASK",
    "LCID_OVERRIDES",
    # ResX
    "RESX_MIMETYPE",
    "RESX_READER_TYPE",
    "RESX_WRITER_TYPE",
    "MIMETYPE_BYTEARRAY",
    "MIMETYPE_BINARY_SERIALIZED",
    "MIMETYPE_SOAP_SERIALIZED",
    "TYPE_STRING",
    "TYPE_NULL_REF",
    "TYPE_FILE_REF",
    "TYPE_BYTE_ARRAY",
]

# ============================================================================
# RESERVED KEYS
# ============================================================================

LCID_KEY: str = "lcid"
"""Numeric Windows locale identifier of the file's culture (0 if none)."""

LANG_KEY: str = "lang"
"""Canonical culture name of the file (empty string if none)."""

BUILD_MARKER_KEY: str = "r2jng"
"""Build generation marker shared by every document of one run."""

# Insertion order of the reserved keys at the end of each document.
RESERVED_KEYS: tuple[str, ...] = (LCID_KEY, LANG_KEY, BUILD_MARKER_KEY)

# ============================================================================
# MESSAGES
# ============================================================================

MESSAGE_SOURCE: str = "ResxToJsonNg"

MSG_NO_RESOURCES: str = (
    "Skipping conversion of Resource files to json, as there are no resource "
    "files found in the project. If your resx file is not being picked up, "
    "check if the file is marked for build action = 'Embedded Resource'"
)

MSG_RUN_STARTED: str = "Started converting Resx To JSON"

# Formatted with the resource file path as given by the caller.
MSG_FILE_STARTED: str = "Started converting Resx {path}"

# Formatted with the output file name (not the full path).
MSG_FILE_GENERATED: str = "Generated file {name}"

# ============================================================================
# OUTPUT
# ============================================================================

JSON_EXTENSION: str = ".json"

OUTPUT_ENCODING: str = "utf-8"

# ============================================================================
# TIME
# ============================================================================

# Windows FILETIME counts 100-nanosecond intervals since 1601-01-01 UTC.
FILETIME_EPOCH: datetime = datetime(1601, 1, 1, tzinfo=UTC)

FILETIME_TICKS_PER_SECOND: int = 10_000_000

# ============================================================================
# LOCALE IDENTIFIERS
# ============================================================================

LCID_NEUTRAL: int = 0
"""LCID written when the file name carries no parseable culture."""

LCID_CUSTOM_UNSPECIFIED: int = 0x1000
"""LCID for recognized cultures that have no assigned Windows identifier."""

LCID_PRIMARY_LANGUAGE_MASK: int = 0x03FF

# Checked before locale.windows_locale, keyed by POSIX identifier
# (language[_Script][_TERRITORY]). windows_locale maps several LCIDs to the
# same name (sort orders, script variants) and has no entries for neutral
# or script-qualified cultures whose identifiers are not the primary
# language id; these pin the identifier .NET reports.
LCID_OVERRIDES: dict[str, int] = {
    # specific cultures listed more than once
    "es_ES": 0x0C0A,
    "az_AZ": 0x042C,
    "bs_BA": 0x141A,
    "sr_BA": 0x181A,
    "sr_SP": 0x081A,
    "uz_UZ": 0x0443,
    "iu_CA": 0x085D,
    # neutral cultures
    "zh": 0x7804,
    "sr": 0x7C1A,
    "bs": 0x781A,
    # script-qualified neutral cultures
    "zh_Hans": 0x0004,
    "zh_Hant": 0x7C04,
    "sr_Latn": 0x701A,
    "sr_Cyrl": 0x6C1A,
    "bs_Latn": 0x681A,
    "bs_Cyrl": 0x641A,
    "az_Latn": 0x782C,
    "az_Cyrl": 0x742C,
    "uz_Latn": 0x7C43,
    "uz_Cyrl": 0x7843,
    # script-qualified specific cultures
    "sr_Latn_RS": 0x241A,
    "sr_Cyrl_RS": 0x281A,
    "sr_Latn_ME": 0x2C1A,
    "sr_Cyrl_ME": 0x301A,
    "sr_Latn_BA": 0x181A,
    "sr_Cyrl_BA": 0x1C1A,
    "bs_Latn_BA": 0x141A,
    "bs_Cyrl_BA": 0x201A,
    "az_Latn_AZ": 0x042C,
    "az_Cyrl_AZ": 0x082C,
    "uz_Latn_UZ": 0x0443,
    "uz_Cyrl_UZ": 0x0843,
}

# ============================================================================
# RESX
# ============================================================================

RESX_MIMETYPE: str = "text/microsoft-resx"

RESX_READER_TYPE: str = "System.Resources.ResXResourceReader"

RESX_WRITER_TYPE: str = "System.Resources.ResXResourceWriter"

MIMETYPE_BYTEARRAY: str = "application/x-microsoft.net.object.bytearray.base64"

MIMETYPE_BINARY_SERIALIZED: str = "application/x-microsoft.net.object.binary.base64"

MIMETYPE_SOAP_SERIALIZED: str = "application/x-microsoft.net.object.soap.base64"

TYPE_STRING: str = "System.String"

TYPE_NULL_REF: str = "System.Resources.ResXNullRef"

TYPE_FILE_REF: str = "System.Resources.ResXFileRef"

TYPE_BYTE_ARRAY: str = "System.Byte[]"
