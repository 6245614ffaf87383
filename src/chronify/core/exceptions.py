"""Exception hierarchy for chronify."""


class ChronifyError(Exception):
    """Base exception for all chronify errors."""

    pass


class InvalidTimeExpression(ChronifyError):
    """Blank expression, or a range start no grammar could resolve."""

    pass


class MalformedDuration(ChronifyError):
    """Clock-style duration string without an H:M:S shape."""

    pass


class InvalidArgument(ChronifyError, ValueError):
    """Negative duration, unknown style or unknown guess position."""

    pass


class ConfigError(ChronifyError):
    """Configuration or environment error."""

    pass
