"""Permission parsing and setting."""

import os
import pathlib as pl
import re

from tap import cli, consts, icons
from tap.errors import CapabilityError, ModeFormatError, TapError

_OCTAL_RE = re.compile(r"[0-7]+")


def supports_mode_bits() -> bool:
    """Whether the platform exposes POSIX permission bits."""
    return os.name == "posix"


def parse_mode(text: str, path: pl.Path | None = None) -> int:
    """Parse an octal permission string such as ``"644"``."""
    if _OCTAL_RE.fullmatch(text) is None:
        raise ModeFormatError("Invalid chmod value", path, f"'{text}' is not an octal number")
    mode = int(text, 8)
    if mode > consts.MODE_MAX:
        raise ModeFormatError("Invalid chmod value", path, f"'{text}' is larger than {consts.MODE_MAX:o}")
    return mode


def set_permissions(path: pl.Path, chmod: str, recursive: bool = False, verbose: bool = False) -> None:  # noqa: FBT001, FBT002
    """Set the mode of a path, replacing the previous mode entirely.

    With ``recursive``, every entry below a directory gets the mode before
    the directory itself does. Symlinked directories below ``path`` are not
    descended into.
    """
    if not supports_mode_bits():
        raise CapabilityError("Failed to set permissions", path, f"not supported on this platform ({os.name})")
    mode = parse_mode(chmod, path)
    _apply_mode(path, mode, chmod, recursive=recursive, verbose=verbose)


def _apply_mode(path: pl.Path, mode: int, chmod: str, *, recursive: bool, verbose: bool) -> None:
    if recursive and path.is_dir():
        try:
            entries = list(path.iterdir())
        except OSError as err:
            raise TapError("Failed to read directory", path, err) from err
        for entry in entries:
            if entry.is_dir() and entry.is_symlink():
                continue
            _apply_mode(entry, mode, chmod, recursive=recursive, verbose=verbose)

    try:
        os.chmod(path, mode)
    except OSError as err:
        raise TapError("Failed to set permissions", path, err) from err
    cli.echo_verbose(verbose, icons.ICON_LOCK, f"Permissions set to {chmod} for: {path}")
