"""Resolve a single time expression to an instant.

Three grammars are tried in strict order:

1. plain digits, read as minutes ago ("45");
2. compound interval shorthand, read as time ago ("1d2h30m");
3. anything else goes to the semantic parser ("yesterday 5:30pm").

The first two are exact. The third is best-effort: a phrase the semantic
parser does not understand yields None rather than an exception, and so does
an offset too large to land on the calendar.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from .config import get_config
from .exceptions import InvalidTimeExpression
from .grammar import match_interval, match_numeric
from .semantic import DateparserSemanticParser
from .types import Clock, GuessPosition, SemanticParser, TemporalExpression

logger = logging.getLogger(__name__)


def seconds_ago(text: str) -> int | None:
    """Seconds described by numeric or interval shorthand, else None."""
    m = match_numeric(text)
    if m:
        return m.int_field("minutes") * 60

    m = match_interval(text)
    if m:
        return m.int_field("days") * 86400 + m.int_field("hours") * 3600 + m.int_field("minutes") * 60

    return None


class GrammarDispatcher:
    """Route expressions to the right grammar.

    Args:
        clock: Reference clock; defaults to ``datetime.now``
        parser: Semantic parser for free text; defaults to dateparser
        ambiguous_time_range: Hours window passed to the semantic parser
    """

    def __init__(
        self,
        clock: Clock | None = None,
        parser: SemanticParser | None = None,
        ambiguous_time_range: int | None = None,
    ):
        self.clock = clock or datetime.now
        self._parser = parser
        self._ambiguous_time_range = ambiguous_time_range

    @property
    def parser(self) -> SemanticParser:
        if self._parser is None:
            self._parser = DateparserSemanticParser(languages=get_config().languages)
        return self._parser

    @property
    def ambiguous_time_range(self) -> int:
        if self._ambiguous_time_range is None:
            return get_config().ambiguous_time_range
        return self._ambiguous_time_range

    def resolve(self, expression: TemporalExpression, now: datetime | None = None) -> datetime | None:
        """Resolve an expression against ``now`` (sampled from the clock if omitted).

        Raises:
            InvalidTimeExpression: If the expression is blank
        """
        text = expression.text.strip()
        if not text:
            raise InvalidTimeExpression(f"Invalid time expression {expression.text!r}")

        if now is None:
            now = self.clock()

        secs = seconds_ago(text)
        if secs is not None:
            try:
                return now - timedelta(seconds=secs)
            except OverflowError:
                logger.debug("offset %r reaches outside the calendar", text)
                return None

        return self.parser.parse(
            text,
            now=now,
            guess_position=expression.context.guess_position,
            temporal_bias=expression.context.temporal_bias,
            ambiguous_time_range=self.ambiguous_time_range,
        )


def resolve_instant(
    expression: str,
    future: bool = False,
    guess_position: GuessPosition | str = GuessPosition.BEGIN,
    *,
    clock: Clock | None = None,
    parser: SemanticParser | None = None,
    ambiguous_time_range: int | None = None,
) -> datetime | None:
    """Convert a time expression into an instant.

    Accepts interval shorthand ("1d2h30m", "45m"), plain minutes ("45"),
    natural-language phrases ("yesterday 5:30pm") and formatted timestamps
    ("2016-03-15 15:32:04").

    Args:
        expression: Text to resolve
        future: Assume ambiguous phrases refer to the future
        guess_position: "begin" or "end" of the span a phrase names
        clock: Reference clock; defaults to ``datetime.now``
        parser: Semantic parser; defaults to dateparser
        ambiguous_time_range: Hours window for bare clock times

    Returns:
        The resolved instant, or None if the free-text fallback gave up

    Raises:
        InvalidTimeExpression: If the expression is blank
        InvalidArgument: If guess_position is not "begin" or "end"
    """
    dispatcher = GrammarDispatcher(clock=clock, parser=parser, ambiguous_time_range=ambiguous_time_range)
    return dispatcher.resolve(TemporalExpression.of(expression, future, guess_position))
