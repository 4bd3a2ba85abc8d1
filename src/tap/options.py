"""Invocation options."""

import dataclasses
import pathlib as pl


@dataclasses.dataclass(frozen=True)
class TapOptions:
    """Options of one invocation, as parsed from the command line."""

    paths: tuple[str, ...]
    dir: bool = False
    chmod: str | None = None
    write: str | None = None
    timestamp: str | None = None
    append: bool = False
    verbose: bool = False
    recursive: bool = False
    template: pl.Path | None = None
    trim: bool = False
    check: bool = False

    @property
    def sets_content(self) -> bool:
        """Whether file content is replaced or extended."""
        return self.write is not None or self.template is not None

    @property
    def touch_only(self) -> bool:
        """Whether only existence and timestamps of files are affected."""
        return not self.sets_content and not self.trim
