"""Expansion of glob patterns into concrete paths."""

import glob
import pathlib as pl
from collections.abc import Iterable

from tap import cli
from tap.errors import PatternError


def validate_pattern(pattern: str) -> None:
    """Raise :class:`PatternError` if a glob pattern is malformed."""
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "[":
            end = _class_end(pattern, i)
            if end is None:
                raise PatternError("Invalid glob pattern", pattern, f"unclosed character class at position {i}")
            i = end
        elif char == "*" and pattern.startswith("**", i):
            _check_recursive_wildcard(pattern, i)
            i += 2
        i += 1


def _class_end(pattern: str, start: int) -> int | None:
    """Index of the ``]`` closing the character class opened at ``start``."""
    i = start + 1
    if i < len(pattern) and pattern[i] in "!^":
        i += 1
    if i < len(pattern) and pattern[i] == "]":
        # `[]` and `[!]` are empty classes, `[]]` is a class holding `]`
        if i + 1 >= len(pattern) or "]" not in pattern[i + 1 :]:
            raise PatternError("Invalid glob pattern", pattern, f"empty character class at position {start}")
        i += 1
    end = pattern.find("]", i)
    return None if end == -1 else end


def _check_recursive_wildcard(pattern: str, index: int) -> None:
    """``**`` must be a whole path component."""
    before_ok = index == 0 or pattern[index - 1] == "/"
    after = index + 2
    after_ok = after == len(pattern) or pattern[after] == "/"
    if not (before_ok and after_ok):
        raise PatternError(
            "Invalid glob pattern",
            pattern,
            f"recursive wildcards must form a single path component at position {index}",
        )


def expand_pattern(pattern: str) -> list[pl.Path]:
    """Expand one pattern.

    A valid pattern that matches nothing is returned as a literal path, so
    files that do not exist yet can be created.
    """
    validate_pattern(pattern)
    matches = [pl.Path(p) for p in sorted(glob.iglob(pattern, recursive=True, include_hidden=True))]
    if len(matches) == 0:
        return [pl.Path(pattern)]
    return matches


def expand_paths(patterns: Iterable[str]) -> list[pl.Path]:
    """Expand patterns into paths, in order, keeping duplicates.

    Malformed patterns are reported and skipped.
    """
    expanded: list[pl.Path] = []
    for pattern in patterns:
        try:
            expanded.extend(expand_pattern(pattern))
        except PatternError as err:
            cli.echo_error(f"Invalid glob pattern '{pattern}': {err.cause}")
    return expanded
