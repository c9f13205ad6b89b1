"""Utility helpers for working with files."""

from __future__ import annotations

import hashlib
import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import AbstractSet, Iterator

from mdshelf.exceptions import InputAccessError, OutputWriteError

LOGGER = logging.getLogger(__name__)

HIDDEN_PREFIX = "."
SITE_DIR_MODE = 0o755


def iter_markdown_paths(
    directory: Path,
    *,
    ignore_names: AbstractSet[str],
    extension: str = ".md",
    exclude: AbstractSet[Path] = frozenset(),
) -> Iterator[Path]:
    """Yield document paths below ``directory`` in sorted name order.

    Hidden entries, directories named in ``ignore_names`` and directories whose
    resolved path is in ``exclude`` are pruned. Any other entry carrying the
    extension is yielded, even when it cannot be read.
    """
    try:
        children = sorted(directory.iterdir(), key=lambda child: child.name)
    except OSError as exc:
        raise InputAccessError(directory, exc.strerror or str(exc)) from exc

    for child in children:
        if child.name.startswith(HIDDEN_PREFIX):
            continue
        if child.is_dir():
            if child.name in ignore_names or child.resolve() in exclude:
                LOGGER.debug("Skipping directory %s", child)
                continue
            yield from iter_markdown_paths(
                child, ignore_names=ignore_names, extension=extension, exclude=exclude
            )
        elif child.name.endswith(extension):
            yield child


def compute_sha256(path: Path) -> str:
    """Compute SHA256 hash for a file."""
    sha = hashlib.sha256()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(1 << 20), b""):
            sha.update(chunk)
    return sha.hexdigest()


def write_text(path: Path, content: str) -> None:
    """Write UTF-8 text with LF newlines, always ending in a newline."""
    if not content.endswith("\n"):
        content += "\n"
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(content)
    except OSError as exc:
        raise OutputWriteError(path, exc.strerror or str(exc)) from exc


def copy_tree(source: Path, destination: Path) -> list[Path]:
    """Copy every file under ``source`` into ``destination``, returning the copies."""
    if not source.is_dir():
        raise InputAccessError(source, "asset directory does not exist")

    copied: list[Path] = []
    for item in sorted(source.rglob("*")):
        if not item.is_file():
            continue
        target = destination / item.relative_to(source)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(item, target)
        except OSError as exc:
            raise OutputWriteError(target, exc.strerror or str(exc)) from exc
        copied.append(target)
    return copied


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def _swap_into_place(staging: Path, target: Path) -> None:
    backup = None
    try:
        if target.exists() or target.is_symlink():
            backup = staging.with_name(f"{staging.name}.old")
            os.replace(target, backup)
        os.replace(staging, target)
    except OSError as exc:
        if backup is not None and not target.exists():
            os.replace(backup, target)
        raise OutputWriteError(target, exc.strerror or str(exc)) from exc

    if backup is not None:
        try:
            _remove(backup)
        except OSError as exc:
            raise OutputWriteError(backup, exc.strerror or str(exc)) from exc


@contextmanager
def staged_directory(target: Path) -> Iterator[Path]:
    """Yield an empty sibling of ``target`` that replaces it once the block succeeds.

    On any error the staging directory is removed and ``target`` is left as it was.
    """
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        staging = Path(tempfile.mkdtemp(prefix=f".{target.name}-", dir=target.parent))
        staging.chmod(SITE_DIR_MODE)
    except OSError as exc:
        raise OutputWriteError(target, exc.strerror or str(exc)) from exc

    try:
        yield staging
        _swap_into_place(staging, target)
    except Exception:
        shutil.rmtree(staging, ignore_errors=True)
        raise
