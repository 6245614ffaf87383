"""Pattern grammars for time expressions.

Each matcher takes raw text and returns either ``Matched`` with the named
fields it captured or ``NO_MATCH``. Matchers never raise and never look at
the clock, so precedence is decided by whoever calls them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# ----------------------------
# Result types
# ----------------------------


@dataclass(frozen=True)
class NoMatch:
    """The grammar did not recognize the text."""

    def __bool__(self) -> bool:
        return False


NO_MATCH = NoMatch()


@dataclass(frozen=True)
class Matched:
    """The grammar recognized the text; ``fields`` holds named captures."""

    fields: dict[str, str | None] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return True

    def __getitem__(self, key: str) -> str | None:
        return self.fields[key]

    def int_field(self, key: str) -> int:
        value = self.fields.get(key)
        return int(value) if value else 0


GrammarMatch = Matched | NoMatch

# ----------------------------
# Regexes
# ----------------------------

# "45" -> minutes
_NUMERIC_RE = re.compile(r"^(?P<minutes>\d+)$")

# "1d2h30m", "2h", "90m"; every part optional, nothing else allowed
_INTERVAL_RE = re.compile(
    r"^(?:(?P<days>\d+)d)?(?:(?P<hours>\d+)h)?(?:(?P<minutes>\d+)m)?$",
    re.IGNORECASE,
)

# "1:30" as a quantity of hours and minutes
_CLOCK_QUANTITY_RE = re.compile(r"^(?P<hours>\d+):(?P<minutes>\d\d)$")

# Amount with optional unit, scanned anywhere: "1.5h 20m", "2d", "45"
_QUANTITY_TERM_RE = re.compile(r"(?P<amount>\d+(?:\.\d+)?)(?P<unit>[hmd])?", re.IGNORECASE)

# "2023-01-01 10:00", the canonical rendering of an instant
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"
_STRICT_ISO_RE = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d\d)-(?P<day>\d\d) (?P<hour>\d\d):(?P<minute>\d\d)$"
)

# "01:30:00" anywhere in the text
_CLOCK_DURATION_RE = re.compile(r"(?P<hours>\d+):(?P<minutes>\d+):(?P<seconds>\d+)")

# Whitespace-delimited range connectors; hyphenated words and dates never split
_RANGE_CONNECTOR_RE = re.compile(
    r"\s+(?P<connector>to|through|thru|(?:un)?til|-+)\s+",
    re.IGNORECASE,
)

# ----------------------------
# Matchers
# ----------------------------


def _match(regex: re.Pattern[str], text: str) -> GrammarMatch:
    m = regex.match(text.strip())
    if not m:
        return NO_MATCH
    return Matched(m.groupdict())


def match_numeric(text: str) -> GrammarMatch:
    """Plain digits, read as a number of minutes."""
    return _match(_NUMERIC_RE, text)


def match_interval(text: str) -> GrammarMatch:
    """Compound day/hour/minute shorthand such as ``1d2h30m``.

    Blank text is not an interval even though every part is optional.
    """
    if not text.strip():
        return NO_MATCH
    return _match(_INTERVAL_RE, text)


def match_clock_quantity(text: str) -> GrammarMatch:
    """``H:MM`` read as a quantity, not a time of day."""
    return _match(_CLOCK_QUANTITY_RE, text)


def match_strict_iso(text: str) -> GrammarMatch:
    """Canonical ``YYYY-MM-DD HH:MM`` timestamp."""
    return _match(_STRICT_ISO_RE, text)


def match_clock_duration(text: str) -> GrammarMatch:
    """First ``H:M:S`` group anywhere in the text."""
    m = _CLOCK_DURATION_RE.search(text)
    if not m:
        return NO_MATCH
    return Matched(m.groupdict())


def scan_quantity_terms(text: str) -> list[tuple[str, str]]:
    """All ``(amount, unit)`` terms in order; unit defaults to ``m``."""
    return [
        (m.group("amount"), (m.group("unit") or "m").lower())
        for m in _QUANTITY_TERM_RE.finditer(text)
    ]


def match_range_connector(text: str) -> GrammarMatch:
    """First range connector; fields carry the text on either side."""
    m = _RANGE_CONNECTOR_RE.search(text)
    if not m:
        return NO_MATCH
    return Matched(
        {
            "left": text[: m.start()],
            "connector": m.group("connector"),
            "right": text[m.end() :],
        }
    )
