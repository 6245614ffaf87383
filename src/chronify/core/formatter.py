"""Render second counts as human-readable durations."""

from .durations import parse_clock_duration
from .exceptions import InvalidArgument
from .types import DurationStyle, coerce_style


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def _split(seconds: int) -> tuple[int, int, int, int]:
    """Break seconds into (days, hours, minutes, seconds)."""
    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)
    return days, hours, minutes, secs


def format_duration(seconds: int, style: DurationStyle | str = DurationStyle.DHM) -> str:
    """Format a duration.

    Styles:
        dhm      1d2h30m
        hm       26:30
        m        1590m
        clock    26:30:00
        natural  1 day, 2 hours, 30 minutes

    All styles except ``clock`` drop leftover seconds.

    Raises:
        InvalidArgument: If seconds is negative or the style is unknown
    """
    style = coerce_style(style)
    seconds = int(seconds)
    if seconds < 0:
        raise InvalidArgument(f"Duration cannot be negative: {seconds}")

    days, hours, minutes, secs = _split(seconds)
    total_hours = days * 24 + hours

    if style is DurationStyle.CLOCK:
        return f"{total_hours:02d}:{minutes:02d}:{secs:02d}"
    if style is DurationStyle.HM:
        return f"{total_hours}:{minutes:02d}"
    if style is DurationStyle.M:
        return f"{seconds // 60}m"
    if style is DurationStyle.NATURAL:
        parts = [
            _plural(n, unit)
            for n, unit in ((days, "day"), (hours, "hour"), (minutes, "minute"))
            if n
        ]
        return ", ".join(parts) if parts else "0 minutes"

    out = "".join(f"{n}{unit}" for n, unit in ((days, "d"), (hours, "h"), (minutes, "m")) if n)
    return out or "0m"


def format_clock_duration(expression: str, style: DurationStyle | str = DurationStyle.DHM) -> str:
    """Re-render an ``H:M:S`` duration string in another style."""
    return format_duration(parse_clock_duration(expression), style)
