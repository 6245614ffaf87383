"""Type definitions and protocols for chronify."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Protocol

from .exceptions import InvalidArgument

Clock = Callable[[], datetime]


class GuessPosition(Enum):
    """Which end of an implied span a phrase resolves to."""

    BEGIN = "begin"
    END = "end"


class TemporalBias(Enum):
    """Whether ambiguous phrases lean toward the future or the past."""

    FUTURE = "future"
    PAST = "past"


class DurationStyle(Enum):
    """Output styles understood by the duration formatter."""

    DHM = "dhm"
    HM = "hm"
    M = "m"
    CLOCK = "clock"
    NATURAL = "natural"


def coerce_guess(value: "GuessPosition | str") -> GuessPosition:
    """Accept a GuessPosition or its string value ("begin"/"end")."""
    if isinstance(value, GuessPosition):
        return value
    try:
        return GuessPosition(str(value).strip().lower())
    except ValueError as e:
        raise InvalidArgument(f"Unknown guess position: {value!r}") from e


def coerce_style(value: "DurationStyle | str") -> DurationStyle:
    """Accept a DurationStyle or its string value."""
    if isinstance(value, DurationStyle):
        return value
    try:
        return DurationStyle(str(value).strip().lower())
    except ValueError as e:
        raise InvalidArgument(f"Unknown duration style: {value!r}") from e


@dataclass(frozen=True)
class DisambiguationContext:
    """Bias and guess position applied to relative or partial phrases."""

    temporal_bias: TemporalBias = TemporalBias.PAST
    guess_position: GuessPosition = GuessPosition.BEGIN


@dataclass(frozen=True)
class TemporalExpression:
    """A single expression to resolve, with its disambiguation context."""

    text: str
    context: DisambiguationContext = field(default_factory=DisambiguationContext)

    @classmethod
    def of(
        cls,
        text: str,
        future: bool = False,
        guess_position: "GuessPosition | str" = GuessPosition.BEGIN,
    ) -> "TemporalExpression":
        bias = TemporalBias.FUTURE if future else TemporalBias.PAST
        return cls(text, DisambiguationContext(bias, coerce_guess(guess_position)))


@dataclass(frozen=True)
class TimeRange:
    """Start/finish pair; finish is None for an open-ended range.

    start <= finish is not enforced.
    """

    start: datetime
    finish: datetime | None = None


@dataclass(frozen=True)
class DateTag:
    """A date-carrying tag found in text."""

    name: str  # Tag name as typed, without the leading "@"
    embedded_text: str  # Text between the parentheses
    start: int  # Offset of the "@"
    end: int  # Offset just past the closing ")"


class SemanticParser(Protocol):
    """Protocol for free-text date parsers the dispatcher delegates to."""

    def parse(
        self,
        phrase: str,
        *,
        now: datetime,
        guess_position: GuessPosition,
        temporal_bias: TemporalBias,
        ambiguous_time_range: int,
    ) -> datetime | None:
        """Resolve a natural-language phrase.

        Args:
            phrase: Raw phrase as typed
            now: Reference instant relative phrases are measured from
            guess_position: Begin or end of the span the phrase names
            temporal_bias: Prefer future or past readings
            ambiguous_time_range: Hours window for bare clock times

        Returns:
            Resolved instant, or None when the phrase is not understood
        """
        ...
