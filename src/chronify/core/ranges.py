"""Split "X to Y" style expressions into a start/finish range."""

from __future__ import annotations

import logging

from .dispatcher import GrammarDispatcher
from .exceptions import InvalidTimeExpression
from .grammar import TIMESTAMP_FORMAT, match_range_connector
from .types import Clock, GuessPosition, SemanticParser, TemporalExpression, TimeRange

logger = logging.getLogger(__name__)


def split_range(
    expression: str,
    *,
    clock: Clock | None = None,
    parser: SemanticParser | None = None,
    ambiguous_time_range: int | None = None,
) -> TimeRange:
    """Resolve a range expression such as "mon 3pm to mon 5pm".

    The left side resolves toward the beginning of what it names, the right
    side toward the end. Without a connector the whole expression is resolved
    both ways, so "yesterday" covers the whole day.

    Returns:
        TimeRange; finish is None when the end side could not be resolved

    Raises:
        InvalidTimeExpression: If the start cannot be resolved
    """
    dispatcher = GrammarDispatcher(clock=clock, parser=parser, ambiguous_time_range=ambiguous_time_range)
    now = dispatcher.clock()

    m = match_range_connector(expression)
    if m:
        left, right = m["left"], m["right"]
    else:
        left = right = expression

    start = dispatcher.resolve(TemporalExpression.of(left, guess_position=GuessPosition.BEGIN), now)
    if start is None:
        raise InvalidTimeExpression(f"Unrecognized date string {expression!r}")
    finish = None
    if right.strip():
        finish = dispatcher.resolve(TemporalExpression.of(right, guess_position=GuessPosition.END), now)

    time_range = TimeRange(start=start, finish=finish)
    logger.debug("date range interpreted as %s", describe_range(time_range))
    return time_range


def describe_range(time_range: TimeRange) -> str:
    """One-line "start -- finish" rendering; open ranges end in "now"."""
    finish = time_range.finish.strftime(TIMESTAMP_FORMAT) if time_range.finish else "now"
    return f"{time_range.start.strftime(TIMESTAMP_FORMAT)} -- {finish}"
