try:
    from importlib.metadata import version

    __version__ = version("chronify")
except Exception:
    __version__ = "unknown"

from .core.dispatcher import resolve_instant
from .core.durations import parse_clock_duration, parse_duration
from .core.exceptions import (
    ChronifyError,
    InvalidArgument,
    InvalidTimeExpression,
    MalformedDuration,
)
from .core.formatter import format_clock_duration, format_duration
from .core.ranges import split_range
from .core.tags import find_date_tags, rewrite_tags
from .core.types import DateTag, DurationStyle, GuessPosition, TimeRange

__all__ = [
    "__version__",
    "resolve_instant",
    "parse_duration",
    "parse_clock_duration",
    "format_duration",
    "format_clock_duration",
    "split_range",
    "rewrite_tags",
    "find_date_tags",
    "ChronifyError",
    "InvalidArgument",
    "InvalidTimeExpression",
    "MalformedDuration",
    "DateTag",
    "DurationStyle",
    "GuessPosition",
    "TimeRange",
]
