"""Duration shorthand parsing.

``parse_duration`` is permissive: anything it cannot read counts as zero,
which suits optional-duration call sites. ``parse_clock_duration`` is strict.
"""

import math

from .exceptions import MalformedDuration
from .grammar import match_clock_duration, match_clock_quantity, scan_quantity_terms

MINUTES_PER_UNIT = {"m": 1, "h": 60, "d": 60 * 24}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def parse_duration(expression: str) -> int:
    """Convert duration shorthand into seconds.

    Accepts ``H:MM`` or a run of ``<amount>[dhm]`` terms such as ``1d2h30m``,
    ``45m``, ``1.5d`` or ``1h20m``. A bare amount counts as minutes.

    Args:
        expression: Duration text

    Returns:
        Whole seconds; 0 when nothing in the text looks like a duration
    """
    m = match_clock_quantity(expression)
    if m:
        return (m.int_field("hours") * 60 + m.int_field("minutes")) * 60

    minutes = 0
    for amount, unit in scan_quantity_terms(expression):
        if unit == "m" and "." not in amount:
            minutes += int(amount)
        else:
            minutes += _round_half_up(float(amount) * MINUTES_PER_UNIT[unit])
    return minutes * 60


def parse_clock_duration(expression: str) -> int:
    """Convert an ``H:M:S`` string into seconds.

    Raises:
        MalformedDuration: If no H:M:S group is present
    """
    m = match_clock_duration(expression)
    if not m:
        raise MalformedDuration(f"Invalid time string: {expression!r}")
    return m.int_field("hours") * 3600 + m.int_field("minutes") * 60 + m.int_field("seconds")
