"""Errors raised while creating or updating paths.

Every error is a :class:`click.ClickException`, so one that escapes the
command is printed as ``Error: <message>`` and the process exits with
status 1.
"""

import os

import click


class TapError(click.ClickException):
    """An operation on a path failed.

    The message is built from what was being attempted, the path it was
    attempted on and the underlying cause, leaving out the parts that are
    absent.
    """

    def __init__(
        self,
        context: str,
        path: str | os.PathLike | None = None,
        cause: BaseException | str | None = None,
    ) -> None:
        self.context = context
        self.path = path
        self.cause = cause
        parts = [context]
        if path is not None:
            parts.append(str(path))
        if cause is not None:
            parts.append(_describe(cause))
        super().__init__(": ".join(parts))


class PatternError(TapError):
    """A glob pattern is malformed."""


class ModeFormatError(TapError):
    """A permission string is not a valid octal mode."""


class TimestampFormatError(TapError):
    """A timestamp string does not describe a valid UTC date and time."""


class CapabilityError(TapError):
    """The platform does not support the requested operation."""


def _describe(cause: BaseException | str) -> str:
    """Short, human-readable description of an error cause."""
    if isinstance(cause, OSError) and cause.strerror:
        return cause.strerror
    return str(cause)
