"""Build generation marker.

Every document produced by one conversion run carries the same build
stamp, so client code can tell which files belong to the same build. The
caller captures the stamp once and passes it to the converter.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from resx2json.constants import FILETIME_EPOCH, FILETIME_TICKS_PER_SECOND

__all__ = ["BuildStamp"]

_TICKS_PER_MICROSECOND = FILETIME_TICKS_PER_SECOND // 1_000_000


@dataclass(frozen=True, slots=True)
class BuildStamp:
    """UTC instant identifying one conversion run.

    Attributes:
        instant: Timezone-aware instant, normalized to UTC
        sub_microsecond_ticks: FILETIME ticks below datetime resolution (0..9),
            kept so stamps built from ticks report them unchanged

    Example:
        >>> stamp = BuildStamp(datetime(2024, 1, 1, tzinfo=UTC))
        >>> stamp.filetime
        133485408000000000
    """

    instant: datetime
    sub_microsecond_ticks: int = 0

    def __post_init__(self) -> None:
        """Normalize the instant to UTC.

        Raises:
            ValueError: If instant is naive (no tzinfo) or
                sub_microsecond_ticks is outside 0..9
        """
        if self.instant.tzinfo is None or self.instant.utcoffset() is None:
            msg = "BuildStamp requires a timezone-aware datetime"
            raise ValueError(msg)
        if not 0 <= self.sub_microsecond_ticks < _TICKS_PER_MICROSECOND:
            msg = (
                f"sub_microsecond_ticks must be in 0..{_TICKS_PER_MICROSECOND - 1}, "
                f"got {self.sub_microsecond_ticks}"
            )
            raise ValueError(msg)
        object.__setattr__(self, "instant", self.instant.astimezone(UTC))

    @classmethod
    def now(cls) -> BuildStamp:
        """Capture the current UTC instant."""
        return cls(datetime.now(UTC))

    @classmethod
    def from_filetime(cls, filetime: int) -> BuildStamp:
        """Build a stamp from Windows FILETIME ticks.

        The ticks round-trip exactly through ``filetime``.

        Raises:
            ValueError: If filetime is negative
        """
        if filetime < 0:
            msg = f"filetime must be non-negative, got {filetime}"
            raise ValueError(msg)
        microseconds, remainder = divmod(filetime, _TICKS_PER_MICROSECOND)
        return cls(FILETIME_EPOCH + timedelta(microseconds=microseconds), remainder)

    @property
    def filetime(self) -> int:
        """Instant as 100-nanosecond ticks since 1601-01-01 UTC."""
        delta = self.instant - FILETIME_EPOCH
        seconds = delta.days * 86_400 + delta.seconds
        return (
            seconds * FILETIME_TICKS_PER_SECOND
            + delta.microseconds * _TICKS_PER_MICROSECOND
            + self.sub_microsecond_ticks
        )
