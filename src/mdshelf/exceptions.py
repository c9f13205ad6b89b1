"""Errors raised while building a site."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class MdshelfError(Exception):
    """Base class for fatal build errors."""


class InputAccessError(MdshelfError):
    """A source directory or document could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path


class OutputWriteError(MdshelfError):
    """Writing the generated site failed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot write {path}: {reason}")
        self.path = path


class IdentifierCollisionError(MdshelfError):
    """Several documents resolve to the same output page."""

    def __init__(self, output_id: str, paths: Sequence[Path]) -> None:
        joined = ", ".join(str(path) for path in paths)
        super().__init__(f"Output id '{output_id}' is claimed by: {joined}")
        self.output_id = output_id
        self.paths = tuple(paths)
