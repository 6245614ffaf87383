"""Natural-language fallback backed by dateparser.

The dispatcher only ever talks to the ``SemanticParser`` protocol; this module
provides the default implementation. dateparser has no notion of "begin" or
"end" of a span, so the adapter maps the period dateparser reports (day, week,
month, year) onto the start of that period or the start of the next one.
Offsets from now such as "2 hours ago" are returned as computed.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from datetime import datetime

from dateparser.date import DateDataParser
from dateutil.relativedelta import relativedelta

from .types import GuessPosition, TemporalBias

logger = logging.getLogger(__name__)

DEFAULT_AMBIGUOUS_TIME_RANGE = 8

# Bare "5:30" with a single-digit hour and no am/pm marker
_AMBIGUOUS_CLOCK_RE = re.compile(
    r"(?<![\d:.])(?P<hour>[1-9]):(?P<minute>[0-5]\d)(?![\d:])(?!\s*[ap]\.?m\b)",
    re.IGNORECASE,
)

# Bare hour after "at": "yesterday at 5"
_AMBIGUOUS_HOUR_RE = re.compile(
    r"\b(?P<at>at\s+)(?P<hour>[1-9]|1[01])\b(?![:.]?\d)(?!\s*(?:[ap]\.?m\b|o'?clock\b))",
    re.IGNORECASE,
)

# Offsets from now ("2 hours ago", "in 3 days") keep their time of day
_RELATIVE_OFFSET_RE = re.compile(
    r"\b(?:ago|hence|from\s+now)\b"
    r"|\bin\s+(?:\d+(?:\.\d+)?|an?|one)\s*(?:min|minutes?|h|hrs?|hours?|d|days?|w|wks?|weeks?|mo|months?|y|yrs?|years?)\b",
    re.IGNORECASE,
)

_PERIOD_STEP = {
    "day": relativedelta(days=1),
    "week": relativedelta(weeks=1),
    "month": relativedelta(months=1),
    "year": relativedelta(years=1),
}


def apply_ambiguous_time_range(phrase: str, window: int) -> str:
    """Read bare clock times below ``window`` o'clock as afternoon times.

    With the default window of 8, "5:30" means 17:30 and "at 5" means 17:00,
    while "9:15", "at 9" and the zero-padded "05:30" are left alone.
    """
    if window <= 1:
        return phrase
    limit = min(window, 12)

    def _shift_clock(m: re.Match[str]) -> str:
        hour = int(m.group("hour"))
        if hour < limit:
            return f"{hour + 12}:{m.group('minute')}"
        return m.group(0)

    def _shift_hour(m: re.Match[str]) -> str:
        hour = int(m.group("hour"))
        if hour < limit:
            return f"{m.group('at')}{hour + 12}:00"
        return m.group(0)

    phrase = _AMBIGUOUS_CLOCK_RE.sub(_shift_clock, phrase)
    return _AMBIGUOUS_HOUR_RE.sub(_shift_hour, phrase)


def is_relative_offset(phrase: str) -> bool:
    """True for phrases measured from now rather than naming a period."""
    return bool(_RELATIVE_OFFSET_RE.search(phrase))


def period_bounds(moment: datetime, period: str) -> tuple[datetime, datetime] | None:
    """Start of the period containing ``moment`` and start of the next one."""
    step = _PERIOD_STEP.get(period)
    if step is None:
        return None
    start = moment.replace(hour=0, minute=0, second=0, microsecond=0)
    if period == "week":
        start -= relativedelta(days=start.weekday())
    elif period == "month":
        start = start.replace(day=1)
    elif period == "year":
        start = start.replace(month=1, day=1)
    return start, start + step


class DateparserSemanticParser:
    """SemanticParser implementation on top of ``dateparser``."""

    def __init__(self, languages: Sequence[str] | None = ("en",)):
        self.languages = list(languages) if languages else None

    def _settings(
        self, now: datetime, guess_position: GuessPosition, temporal_bias: TemporalBias
    ) -> dict:
        return {
            "RELATIVE_BASE": now,
            "PREFER_DATES_FROM": temporal_bias.value,
            "PREFER_DAY_OF_MONTH": "first" if guess_position is GuessPosition.BEGIN else "last",
            "RETURN_TIME_AS_PERIOD": True,
        }

    def parse(
        self,
        phrase: str,
        *,
        now: datetime,
        guess_position: GuessPosition,
        temporal_bias: TemporalBias,
        ambiguous_time_range: int = DEFAULT_AMBIGUOUS_TIME_RANGE,
    ) -> datetime | None:
        text = apply_ambiguous_time_range(phrase.strip(), ambiguous_time_range)
        try:
            ddp = DateDataParser(
                languages=self.languages,
                settings=self._settings(now, guess_position, temporal_bias),
            )
            data = ddp.get_date_data(text)
        except (ValueError, OverflowError) as e:
            logger.debug("dateparser rejected %r: %s", text, e)
            return None

        if data.date_obj is None:
            logger.debug("dateparser found no date in %r", text)
            return None

        # dateparser reports "day" for "2 hours ago"; the offset is already exact
        if is_relative_offset(text):
            return data.date_obj

        bounds = period_bounds(data.date_obj, data.period or "time")
        if bounds is None:
            return data.date_obj
        return bounds[0] if guess_position is GuessPosition.BEGIN else bounds[1]
