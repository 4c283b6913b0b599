"""Timestamp parsing and canonical SRT rendering.

Segment times coming back from the transcription service are loosely
formatted (``MM:SS``, ``HH:MM:SS``, ``.`` or ``,`` as decimal separator, or
already canonical). They are parsed into a structured :class:`Timestamp` and
rendered as ``HH:MM:SS,mmm``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from audio_scribe.exceptions import InvalidTimestampError
from audio_scribe.utils.logging_config import get_logger

logger = get_logger(__name__)

ZERO_TIMESTAMP = "00:00:00,000"

# One to three colon-separated integer fields (at most nine digits each) plus an
# optional fraction.
_TIME_RE = re.compile(r"^(\d{1,9}(?::\d{1,9}){0,2})(?:[.,](\d+))?$")

__all__ = [
    "ZERO_TIMESTAMP",
    "Timestamp",
    "normalize_timestamp",
    "parse_timestamp",
]


@dataclass(frozen=True, order=True)
class Timestamp:
    """A point in time split into hours, minutes, seconds and milliseconds.

    Instances built through :meth:`from_milliseconds` (and therefore through
    :func:`parse_timestamp`) always keep minutes and seconds below 60 and
    milliseconds below 1000, so field-wise ordering matches chronological
    ordering.
    """

    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    @classmethod
    def from_milliseconds(cls, total: int) -> Timestamp:
        """Build a carried-over timestamp from a non-negative millisecond count."""
        if total < 0:
            raise InvalidTimestampError(f"Negative timestamp: {total} ms")
        seconds, ms = divmod(total, 1000)
        minutes, s = divmod(seconds, 60)
        h, m = divmod(minutes, 60)
        return cls(hours=h, minutes=m, seconds=s, milliseconds=ms)

    @property
    def total_milliseconds(self) -> int:
        return (
            (self.hours * 60 + self.minutes) * 60 + self.seconds
        ) * 1000 + self.milliseconds

    def to_srt(self) -> str:
        """Render as ``HH:MM:SS,mmm``."""
        return (
            f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d},{self.milliseconds:03d}"
        )

    def to_vtt(self) -> str:
        """Render as ``HH:MM:SS.mmm``."""
        return self.to_srt().replace(",", ".")


def parse_timestamp(raw: str | None, *, strict: bool = False) -> Timestamp:
    """Parse a loosely formatted time string into a :class:`Timestamp`.

    Accepted shapes are ``SS``, ``MM:SS`` and ``HH:MM:SS``, each optionally
    followed by a ``.`` or ``,`` fraction of a second. The fraction is read as
    decimal seconds and truncated to milliseconds (``1.5`` is 1500 ms).

    Parameters:
        raw (str | None): Time string. Empty or ``None`` parses as zero.
        strict (bool): When ``True``, also reject minutes or seconds of 60 or
            more outside the leading field, and fractions longer than three
            digits. When ``False`` overflowing fields carry over
            (``75:00`` is one hour and fifteen minutes).

    Returns:
        Timestamp: The parsed, carried-over timestamp.

    Raises:
        InvalidTimestampError: If `raw` does not match an accepted shape, or
            violates the strict range rules.
    """
    if raw is None or not raw.strip():
        return Timestamp()

    match = _TIME_RE.match(raw.strip())
    if match is None:
        raise InvalidTimestampError(f"Unrecognised timestamp: {raw!r}")

    fields = [int(part) for part in match.group(1).split(":")]
    fraction = match.group(2) or ""

    if strict:
        if any(value >= 60 for value in fields[1:]):
            raise InvalidTimestampError(f"Minutes/seconds out of range in {raw!r}")
        if len(fraction) > 3:
            raise InvalidTimestampError(f"Sub-millisecond precision in {raw!r}")

    hours, minutes, seconds = [0] * (3 - len(fields)) + fields
    millis = int((fraction + "000")[:3])
    total = ((hours * 60 + minutes) * 60 + seconds) * 1000 + millis
    return Timestamp.from_milliseconds(total)


def _legacy_cleanup(raw: str) -> str:
    """Best-effort textual fix-up for strings that cannot be parsed."""
    clean = raw.replace(".", ",", 1)
    if "," not in clean:
        clean += ",000"
    return clean


def normalize_timestamp(raw: str | None) -> str:
    """Canonicalize a free-form time string as an SRT timestamp.

    This is a total function: unparseable input is not rejected but passed
    through a textual cleanup (first ``.`` becomes ``,``, ``,000`` appended
    when no millisecond separator exists) and a warning is logged. Use
    :func:`parse_timestamp` with ``strict=True`` where rejection is wanted.

    Examples:
        >>> normalize_timestamp("00:00:01.500")
        '00:00:01,500'
        >>> normalize_timestamp("0:01")
        '00:00:01,000'
        >>> normalize_timestamp("")
        '00:00:00,000'
    """
    if raw is None:
        return ZERO_TIMESTAMP
    try:
        return parse_timestamp(raw).to_srt()
    except InvalidTimestampError:
        cleaned = _legacy_cleanup(raw)
        logger.warning("Coercing unparseable timestamp %r to %r", raw, cleaned)
        return cleaned
