"""Write a planned site to disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib.resources import files
from pathlib import Path
from typing import Mapping

from mdshelf.exceptions import OutputWriteError
from mdshelf.utils.files import compute_sha256, copy_tree, write_text

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EmittedFile:
    path: Path
    sha256: str


def load_stylesheet() -> str:
    stylesheet = files("mdshelf").joinpath("static", "styles.css")
    return stylesheet.read_text(encoding="utf-8")


def _emitted(path: Path) -> EmittedFile:
    try:
        digest = compute_sha256(path)
    except OSError as exc:
        raise OutputWriteError(path, exc.strerror or str(exc)) from exc
    return EmittedFile(path=path, sha256=digest)


def emit_pages(output_dir: Path, pages: Mapping[str, str]) -> list[EmittedFile]:
    """Write each ``filename -> text`` entry below ``output_dir``."""
    emitted: list[EmittedFile] = []
    for filename, content in pages.items():
        target = output_dir / filename
        write_text(target, content)
        emitted.append(_emitted(target))
        LOGGER.info("Generated: %s", filename)
    return emitted


def emit_assets(asset_dir: Path, destination: Path) -> list[EmittedFile]:
    copied = copy_tree(asset_dir, destination)
    LOGGER.info("Copied %s asset files", len(copied))
    return [_emitted(path) for path in copied]
