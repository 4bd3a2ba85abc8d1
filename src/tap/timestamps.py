"""Timestamp parsing and setting."""

import datetime
import os
import pathlib as pl

from tap import cli, consts, icons
from tap.errors import TapError, TimestampFormatError


def parse_timestamp(text: str, path: pl.Path | None = None) -> datetime.datetime:
    """Parse ``YYYY-MM-DD HH:MM:SS`` as a moment in UTC."""
    try:
        naive = datetime.datetime.strptime(text, consts.TIMESTAMP_FORMAT)  # noqa: DTZ007
    except ValueError as err:
        raise TimestampFormatError(
            "Invalid timestamp format",
            path,
            cause=f"expected {consts.TIMESTAMP_FORMAT_HUMAN}, {err}",
        ) from err
    return naive.replace(tzinfo=datetime.timezone.utc)


def to_epoch_ns(moment: datetime.datetime) -> int:
    """Nanoseconds since the Unix epoch, for whole-second moments."""
    return int(moment.timestamp()) * 1_000_000_000


def set_timestamp(path: pl.Path, text: str, verbose: bool = False) -> None:  # noqa: FBT001, FBT002
    """Set the modification time of a path, keeping its access time."""
    mtime_ns = to_epoch_ns(parse_timestamp(text, path))
    try:
        atime_ns = os.stat(path).st_atime_ns
        os.utime(path, ns=(atime_ns, mtime_ns))
    except OSError as err:
        raise TapError("Failed to set timestamp", path, err) from err
    cli.echo_verbose(verbose, icons.ICON_CLOCK, f"Timestamp set to {text} for: {path}")
