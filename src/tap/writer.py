"""Creation and update of files and directories."""

import os
import pathlib as pl

from tap import cli, icons, utils
from tap.errors import TapError
from tap.options import TapOptions


def create_directory(path: pl.Path, verbose: bool = False) -> None:  # noqa: FBT001, FBT002
    """Create a directory, including missing parents."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise TapError("Failed to create directory", path, err) from err
    cli.echo_verbose(verbose, icons.ICON_FOLDER, f"Directory created: {path}")


def create_or_update_file(path: pl.Path, options: TapOptions) -> None:
    """Make sure a file exists and holds the requested content.

    Trim wins over a template, and a template over literal content. Without
    any of them the file is only touched. Existing content is only truncated
    when new content is being set; a plain touch never alters its bytes.
    """
    if options.trim:
        trim_file(path, verbose=options.verbose)
        return

    if options.touch_only:
        existed = touch_file(path)
        message = f"File timestamp updated: {path}" if existed else f"File created: {path}"
        cli.echo_verbose(options.verbose, icons.ICON_FILE, message)
        return

    if options.template is not None:
        try:
            content = options.template.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as err:
            raise TapError("Failed to read template file", options.template, err) from err
        write_file(path, content, append=options.append)
        cli.echo_verbose(options.verbose, icons.ICON_TEMPLATE, f"File created/updated with template content: {path}")
    elif options.write is not None:
        write_file(path, options.write, append=options.append)
        if options.append:
            cli.echo_verbose(options.verbose, icons.ICON_WRITE, f"Content appended to file: {path}")
        else:
            cli.echo_verbose(options.verbose, icons.ICON_WRITE, f"File created/updated with content: {path}")


def trim_file(path: pl.Path, *, verbose: bool = False) -> None:
    """Strip trailing whitespace from every line of an existing text file."""
    try:
        content = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise TapError("Failed to read file content", path, err) from err
    try:
        path.write_bytes(utils.trim_trailing_whitespace(content).encode("utf-8"))
    except OSError as err:
        raise TapError("Failed to write trimmed content to file", path, err) from err
    cli.echo_verbose(verbose, icons.ICON_TRIM, f"Trailing whitespace removed from: {path}")


def write_file(path: pl.Path, content: str, *, append: bool = False) -> None:
    """Write content to a file, replacing or extending what is there."""
    mode = "ab" if append else "wb"
    try:
        with path.open(mode) as handle:
            handle.write(content.encode("utf-8"))
    except OSError as err:
        raise TapError("Failed to write content to file", path, err) from err


def touch_file(path: pl.Path) -> bool:
    """Create a file if it is missing, or bump its timestamps.

    Returns whether the file existed before.
    """
    existed = path.exists()
    try:
        # O_CREAT without O_TRUNC keeps any existing content
        fd = os.open(path, os.O_WRONLY | os.O_CREAT, 0o666)
        os.close(fd)
        os.utime(path, None)
    except OSError as err:
        raise TapError("Failed to create or open file", path, err) from err
    return existed
