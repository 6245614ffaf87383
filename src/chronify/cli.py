import sys
from datetime import datetime
from typing import NoReturn

import typer
from rich.markup import escape

from . import __version__
from . import logger as log
from .core.config import get_config
from .core.dispatcher import resolve_instant
from .core.durations import parse_duration
from .core.exceptions import ChronifyError
from .core.formatter import format_clock_duration, format_duration
from .core.ranges import describe_range, split_range
from .core.grammar import TIMESTAMP_FORMAT
from .core.tags import rewrite_tags
from .core.types import Clock

app = typer.Typer(add_completion=False)

NOW_HELP = 'Reference time as "YYYY-MM-DD HH:MM" (defaults to the current time)'
STYLE_HELP = "Duration style: dhm|hm|m|clock|natural (defaults to config)"


def version_callback(value: bool) -> None:
    if value:
        print(f"chronify version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable colored output", envvar="NO_COLOR"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show parser diagnostics"),
) -> None:
    log.init_console(no_color=no_color)
    log.setup_logging(verbose=verbose)


def make_clock(now: str | None) -> Clock | None:
    """Build a fixed clock from --now, or None for the system clock."""
    if now is None:
        return None
    try:
        fixed = datetime.fromisoformat(now.strip())
    except ValueError:
        log.error(f"Invalid --now value: {escape(now)}")
        raise typer.Exit(1)
    return lambda: fixed


def resolve_style(style: str | None) -> str:
    """--style if given, else the configured default."""
    return get_config().merge_cli_args(duration_style=style).duration_style


def _fail(e: ChronifyError) -> NoReturn:
    log.error(escape(str(e)))
    raise typer.Exit(1)


@app.command()
def resolve(
    expression: str = typer.Argument(..., help='Time expression, e.g. "45m" or "yesterday 5pm"'),
    future: bool = typer.Option(False, "--future", help="Assume ambiguous phrases are in the future"),
    guess: str = typer.Option("begin", "--guess", help="Resolve to the begin|end of a named span"),
    now: str | None = typer.Option(None, "--now", help=NOW_HELP),
) -> None:
    """Resolve an expression to a single timestamp."""
    try:
        result = resolve_instant(expression, future=future, guess_position=guess, clock=make_clock(now))
    except ChronifyError as e:
        _fail(e)
    if result is None:
        log.warning(f"Could not understand {escape(expression)!r}")
        raise typer.Exit(1)
    log.info(result.strftime(TIMESTAMP_FORMAT))


@app.command("range")
def range_(
    expression: str = typer.Argument(..., help='Range expression, e.g. "mon 3pm to mon 5pm"'),
    now: str | None = typer.Option(None, "--now", help=NOW_HELP),
) -> None:
    """Resolve a range expression to start -- finish."""
    try:
        time_range = split_range(expression, clock=make_clock(now))
    except ChronifyError as e:
        _fail(e)
    log.info(describe_range(time_range))


@app.command()
def duration(
    expression: str = typer.Argument(..., help='Duration shorthand, e.g. "1d2h30m" or "1:30"'),
    style: str | None = typer.Option(None, "--style", help=STYLE_HELP),
) -> None:
    """Parse a duration and show it in seconds and in the chosen style."""
    style = resolve_style(style)
    seconds = parse_duration(expression)
    try:
        formatted = format_duration(seconds, style)
    except ChronifyError as e:
        _fail(e)
    log.info(f"{seconds}s")
    log.dim(formatted)


@app.command()
def clock(
    expression: str = typer.Argument(..., help='Clock duration "H:M:S"'),
    style: str | None = typer.Option(None, "--style", help=STYLE_HELP),
) -> None:
    """Re-render an H:M:S duration in another style."""
    style = resolve_style(style)
    try:
        log.info(format_clock_duration(expression, style))
    except ChronifyError as e:
        _fail(e)


@app.command("format")
def format_(
    seconds: int = typer.Argument(..., help="Duration in seconds"),
    style: str | None = typer.Option(None, "--style", help=STYLE_HELP),
) -> None:
    """Format a number of seconds."""
    style = resolve_style(style)
    try:
        log.info(format_duration(seconds, style))
    except ChronifyError as e:
        _fail(e)


@app.command()
def tags(
    text: str = typer.Argument(..., help='Text containing date tags, or "-" to read stdin'),
    tag: list[str] | None = typer.Option(None, "--tag", "-t", help="Additional date tag name"),
    now: str | None = typer.Option(None, "--now", help=NOW_HELP),
) -> None:
    """Rewrite date tags such as @done(yesterday 5pm) to timestamps."""
    if text == "-":
        text = sys.stdin.read()
    try:
        rewritten = rewrite_tags(text, tag or None, clock=make_clock(now))
    except ChronifyError as e:
        _fail(e)
    log.get_console().print(rewritten, markup=False, highlight=False, soft_wrap=True, end="")
    if not rewritten.endswith("\n"):
        log.get_console().print()
