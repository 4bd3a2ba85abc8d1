"""File system plan. Used to apply the requested changes to one path at a time."""

import dataclasses
import pathlib as pl
from collections.abc import Iterable

import click

from tap import cli, icons, permissions, timestamps, writer
from tap.errors import TapError
from tap.options import TapOptions


@dataclasses.dataclass
class FsPlan:
    """Planned file system change for a single path."""

    path: pl.Path
    options: TapOptions

    def apply(self) -> None:
        """Apply the file system change.

        Permissions and timestamps are only touched once the file or
        directory exists.
        """
        opts = self.options
        cli.echo_verbose(opts.verbose, icons.ICON_PROCESSING, f"Processing: {self.path}")

        if opts.check:
            check_existence(self.path, verbose=opts.verbose)
            return

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            raise TapError("Failed to create parent directories", self.path.parent, err) from err

        if opts.dir:
            writer.create_directory(self.path, verbose=opts.verbose)
        else:
            writer.create_or_update_file(self.path, opts)

        if opts.chmod is not None:
            permissions.set_permissions(self.path, opts.chmod, recursive=opts.recursive, verbose=opts.verbose)

        if opts.timestamp is not None:
            timestamps.set_timestamp(self.path, opts.timestamp, verbose=opts.verbose)


def check_existence(path: pl.Path, *, verbose: bool = False) -> bool:
    """Report whether a path exists, without changing anything."""
    if path.exists():
        cli.echo_verbose(verbose, icons.ICON_CHECK, f"Exists: {path}")
        return True
    click.echo(cli.icon_message(icons.ICON_CROSS, f"Does not exist: {path}"))
    return False


def run_plans(paths: Iterable[pl.Path], options: TapOptions) -> None:
    """Apply one plan per path, in order. The first failure stops the run."""
    for path in paths:
        FsPlan(path=path, options=options).apply()
