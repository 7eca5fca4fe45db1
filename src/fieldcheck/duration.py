"""ISO-8601 duration parsing.

Parses strings such as ``P3Y6M4DT12H30M5S``, ``PT0,5S``, ``-P2W`` into a
:class:`Duration`. Malformed input produces a failed :class:`CheckResult`
instead of an exception so callers can fold it into their own error path.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta

from .result import CheckResult

_NUMBER = r"[0-9]+(?:[.,][0-9]+)?"

_DURATION_RE = re.compile(
    rf"""
    ^(?P<sign>[-+])?P
    (?:
        (?P<weeks>{_NUMBER})W
      |
        (?:(?P<years>{_NUMBER})Y)?
        (?:(?P<months>{_NUMBER})M)?
        (?:(?P<days>{_NUMBER})D)?
        (?P<time>T
            (?:(?P<hours>{_NUMBER})H)?
            (?:(?P<minutes>{_NUMBER})M)?
            (?:(?P<seconds>{_NUMBER})S)?
        )?
    )\Z
    """,
    re.VERBOSE,
)

_DATE_PARTS = ("years", "months", "weeks", "days")
_TIME_PARTS = ("hours", "minutes", "seconds")


@dataclass(frozen=True)
class Duration:
    """A parsed ISO-8601 duration. Absent components are zero."""

    negative: bool = False
    years: float = 0
    months: float = 0
    weeks: float = 0
    days: float = 0
    hours: float = 0
    minutes: float = 0
    seconds: float = 0

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta.

        Raises:
            ValueError: If the duration has year or month components, which
                have no fixed length
        """
        if self.years or self.months:
            raise ValueError("Durations with years or months cannot be converted to timedelta")
        delta = timedelta(
            weeks=self.weeks,
            days=self.days,
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds,
        )
        return -delta if self.negative else delta


def _to_number(text: str) -> float:
    number = float(text.replace(",", "."))
    return int(number) if number.is_integer() else number


def parse_duration(text: object) -> CheckResult:
    """Parse an ISO-8601 duration string.

    Args:
        text: Candidate duration string

    Returns:
        CheckResult whose value is a Duration on success, or the original
        input on failure
    """
    if not isinstance(text, str):
        return CheckResult.failure(text, [f"Duration must be a string, got {type(text).__name__}"])

    match = _DURATION_RE.match(text)
    if match is None:
        return CheckResult.failure(text, [f"Invalid duration: {text!r}"])

    parts = match.groupdict()
    result = CheckResult.success(text)

    if not any(parts[name] is not None for name in _DATE_PARTS + _TIME_PARTS):
        result.add_error(f"Duration has no components: {text!r}")
    if parts["time"] is not None and not any(parts[name] is not None for name in _TIME_PARTS):
        result.add_error(f"Duration time designator without components: {text!r}")
    if not result:
        return result

    result.value = Duration(
        negative=parts["sign"] == "-",
        **{
            name: _to_number(parts[name])
            for name in _DATE_PARTS + _TIME_PARTS
            if parts[name] is not None
        },
    )
    return result
