"""Rewrite date tags in free text to canonical timestamps.

A date tag looks like ``@done(yesterday 5pm)``. Rewriting turns it into
``@done(2024-05-01 17:00)``. Tags whose contents cannot be resolved are left
exactly as they were, so one bad tag never spoils the rest of a document.
Running the rewrite again over its own output changes nothing.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import datetime

from .config import get_config
from .dispatcher import GrammarDispatcher
from .exceptions import InvalidArgument, InvalidTimeExpression
from .grammar import TIMESTAMP_FORMAT, match_strict_iso
from .types import Clock, DateTag, GuessPosition, SemanticParser, TemporalExpression

BASE_WATCH_TAGS: tuple[str, ...] = (
    r"start(?:ed)?",
    r"beg[ia]n",
    r"done",
    r"finished",
    r"completed?",
    r"waiting",
    r"defer(?:red)?",
)

# Tags that record something already over resolve toward the past
_PAST_TAG_RE = re.compile(r"^(?:done|complete)", re.IGNORECASE)

# "(x)" but not "(?:x)" in caller-supplied tag patterns
_CAPTURING_GROUP_RE = re.compile(r"\((?!\?:)(.*?)\)")

TagNames = Iterable[str] | str | None


def normalize_tag_name(name: str) -> str:
    """Strip a leading "@" and make any capturing groups non-capturing."""
    name = re.sub(r"^@", "", name.strip())
    return _CAPTURING_GROUP_RE.sub(r"(?:\1)", name).strip()


def build_watch_list(additional_tags: TagNames = None) -> tuple[str, ...]:
    """Base tag patterns plus configured and caller-supplied names, deduplicated.

    Args:
        additional_tags: Sequence of names, or one comma-separated string
    """
    if isinstance(additional_tags, str):
        additional_tags = re.split(r" *, *", additional_tags)

    names = list(BASE_WATCH_TAGS)
    for extra in (get_config().date_tags, additional_tags or ()):
        names.extend(normalize_tag_name(name) for name in extra)

    return tuple(dict.fromkeys(name for name in names if name))


def _tag_regex(watch_list: tuple[str, ...]) -> re.Pattern[str]:
    pattern = r"(?:(?<=\s)|^)@(?P<tag>(?:%s))\((?P<date>.*?)\)" % "|".join(watch_list)
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise InvalidArgument(f"Invalid date tag pattern in {watch_list!r}: {e}") from e


def _to_tag(m: re.Match[str]) -> DateTag:
    return DateTag(name=m.group("tag"), embedded_text=m.group("date"), start=m.start(), end=m.end())


def find_date_tags(text: str, additional_tags: TagNames = None) -> list[DateTag]:
    """All date tags in ``text`` in order of appearance."""
    regex = _tag_regex(build_watch_list(additional_tags))
    return [_to_tag(m) for m in regex.finditer(text)]


def is_future_tag(name: str) -> bool:
    """Tags other than done/complete(d) describe something still ahead."""
    return not _PAST_TAG_RE.match(name)


def _resolve_tag(tag: DateTag, dispatcher: GrammarDispatcher, now: datetime) -> datetime | None:
    if match_strict_iso(tag.embedded_text):
        try:
            return datetime.strptime(tag.embedded_text.strip(), TIMESTAMP_FORMAT)
        except ValueError:
            return None

    expression = TemporalExpression.of(
        tag.embedded_text, future=is_future_tag(tag.name), guess_position=GuessPosition.BEGIN
    )
    try:
        return dispatcher.resolve(expression, now)
    except InvalidTimeExpression:
        return None


def rewrite_tags(
    text: str,
    additional_tags: TagNames = None,
    *,
    clock: Clock | None = None,
    parser: SemanticParser | None = None,
    ambiguous_time_range: int | None = None,
) -> str:
    """Replace the contents of every resolvable date tag with a timestamp.

    Args:
        text: Free text, e.g. a journal entry
        additional_tags: Extra tag names to treat as date tags
        clock: Reference clock; sampled once for the whole text
        parser: Semantic parser for free-text dates

    Returns:
        Text with resolvable tags rewritten as ``@tag(YYYY-MM-DD HH:MM)``;
        unresolvable tags are left byte-for-byte as they were
    """
    dispatcher = GrammarDispatcher(clock=clock, parser=parser, ambiguous_time_range=ambiguous_time_range)
    now = dispatcher.clock()
    regex = _tag_regex(build_watch_list(additional_tags))

    def _replace(m: re.Match[str]) -> str:
        tag = _to_tag(m)
        parsed = _resolve_tag(tag, dispatcher, now)
        if parsed is None:
            return m.group(0)
        return f"@{tag.name}({parsed.strftime(TIMESTAMP_FORMAT)})"

    return regex.sub(_replace, text)
