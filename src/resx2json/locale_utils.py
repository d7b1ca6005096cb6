"""Culture resolution for resource file names.

Turns the culture segment of a resource file name (``Strings.en-US.resx``)
into a CultureTag carrying the canonical BCP-47 name and the Windows
locale identifier (LCID) that client code keys on.

Locale recognition is delegated to Babel (CLDR data). LCIDs come from the
``locale.windows_locale`` table shipped with the standard library, since
CLDR carries no Windows identifiers.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from resx2json.constants import (
    LCID_CUSTOM_UNSPECIFIED,
    LCID_OVERRIDES,
    LCID_PRIMARY_LANGUAGE_MASK,
)

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "CultureTag",
    "canonical_name",
    "clear_locale_cache",
    "culture_subtags",
    "get_babel_locale",
    "lookup_lcid",
    "normalize_locale",
    "parse_culture",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CultureTag:
    """A recognized culture parsed from a resource file name.

    Attributes:
        name: Canonical culture name (e.g., "en-US", "fr", "sr-Latn-RS")
        lcid: Windows locale identifier (e.g., 1033 for en-US)
        locale: Babel Locale the segment was recognized as; may carry
            likely subtags (script) the name does not
    """

    name: str
    lcid: int
    locale: Locale


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Resource sets usually repeat the same handful of cultures, so each
    code is parsed once per process.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def culture_subtags(segment: str) -> tuple[str, str | None, str | None, str | None]:
    """Split a culture segment into the subtags it actually names.

    Casing is normalized (language lower, script title, territory upper),
    but no likely subtags are added: ``zh-TW`` stays without a script even
    though Babel resolves it to ``zh_Hant_TW``.

    Returns:
        Tuple of (language, territory, script, variant)

    Raises:
        ValueError: If the segment is not a well-formed locale identifier

    Example:
        >>> culture_subtags("zh-tw")
        ('zh', 'TW', None, None)
        >>> culture_subtags("sr-latn-rs")
        ('sr', 'RS', 'Latn', None)
    """
    from babel.core import parse_locale  # noqa: PLC0415

    language, territory, script, variant = parse_locale(normalize_locale(segment))[:4]
    return language, territory, script, variant


def canonical_name(segment: str) -> str:
    """Return the hyphenated culture name for a culture segment.

    Example:
        >>> canonical_name("en_us")
        'en-US'
        >>> canonical_name("zh-TW")
        'zh-TW'
    """
    from babel.core import get_locale_identifier  # noqa: PLC0415

    return get_locale_identifier(culture_subtags(segment), sep="-")


@functools.lru_cache(maxsize=1)
def _lcid_tables() -> tuple[dict[str, int], dict[str, int]]:
    """Build (specific culture -> LCID, language -> LCID) lookup tables.

    The specific table inverts ``locale.windows_locale``; for names listed
    under several identifiers the lowest one wins. The language table maps
    each language to its primary language identifier, which is the LCID of
    most neutral cultures. LCID_OVERRIDES is consulted before both.
    """
    import locale as locale_module  # noqa: PLC0415

    specific: dict[str, int] = {}
    languages: dict[str, int] = {}
    for lcid, posix_name in sorted(locale_module.windows_locale.items()):
        specific.setdefault(posix_name, lcid)
        language = posix_name.split("_", 1)[0]
        languages.setdefault(language, lcid & LCID_PRIMARY_LANGUAGE_MASK)
    return specific, languages


def lookup_lcid(
    language: str,
    territory: str | None = None,
    script: str | None = None,
) -> int:
    """Return the Windows locale identifier for a culture's subtags.

    LCID_OVERRIDES is checked first, keyed by the POSIX identifier
    (``zh``, ``sr_Latn_RS``, ``es_ES``). Otherwise specific cultures
    (language plus territory) are looked up in the Windows table and
    neutral cultures (language only) get the primary language identifier.
    Recognized cultures without a Windows identifier, including
    script-qualified names missing from the overrides, get
    LCID_CUSTOM_UNSPECIFIED (4096).

    Example:
        >>> lookup_lcid("en", "US")
        1033
        >>> lookup_lcid("en")
        9
        >>> lookup_lcid("zh")
        30724
    """
    key = "_".join(part for part in (language, script, territory) if part)
    if key in LCID_OVERRIDES:
        return LCID_OVERRIDES[key]
    if script:
        return LCID_CUSTOM_UNSPECIFIED

    specific, languages = _lcid_tables()
    if territory:
        return specific.get(f"{language}_{territory}", LCID_CUSTOM_UNSPECIFIED)
    return languages.get(language, LCID_CUSTOM_UNSPECIFIED)


def parse_culture(segment: str) -> CultureTag | None:
    """Parse a file-name culture segment into a CultureTag.

    Babel decides whether the segment is a culture at all. The name and
    LCID are built from the subtags the segment itself contains.

    Unrecognized or malformed segments (``Designer``, ``v2``, ``x-y-z``)
    yield None, which callers treat as the neutral culture. Nothing is
    raised for them.

    Args:
        segment: Culture segment without surrounding dots (e.g., "en-US")

    Returns:
        CultureTag for a recognized culture, None otherwise

    Example:
        >>> parse_culture("en-US").lcid
        1033
        >>> parse_culture("zh-TW").name
        'zh-TW'
        >>> parse_culture("Designer") is None
        True
    """
    if not segment:
        return None

    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        babel_locale = get_babel_locale(segment)
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("'%s' is not a culture, using neutral culture: %s", segment, e)
        return None

    language, territory, script, _ = culture_subtags(segment)
    tag = CultureTag(
        name=canonical_name(segment),
        lcid=lookup_lcid(language, territory, script),
        locale=babel_locale,
    )
    logger.debug("Resolved culture '%s' -> %s (lcid=%d)", segment, tag.name, tag.lcid)
    return tag
