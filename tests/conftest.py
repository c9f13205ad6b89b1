"""Shared fixtures for building small document trees."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

import pytest

from mdshelf.models import DocumentRecord

BASE_MTIME = 1_700_000_000.0


def write_doc(root: Path, relative: str, content: str, mtime: float = BASE_MTIME) -> Path:
    """Create ``root/relative`` with ``content`` and a fixed modification time."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Root document plus one nested document in ``notes``."""
    root = tmp_path / "docs"
    write_doc(root, "root.md", "# Root Doc\nHello world.", mtime=BASE_MTIME + 100)
    write_doc(root, "notes/sub.md", "# Sub\nDetail here.", mtime=BASE_MTIME)
    return root


@pytest.fixture
def make_record() -> Callable[..., DocumentRecord]:
    def _make(
        base_name: str,
        relative_folder: str = "",
        *,
        title: str | None = None,
        modified_at: float = BASE_MTIME,
        output_id: str | None = None,
    ) -> DocumentRecord:
        if output_id is None:
            output_id = (
                relative_folder.replace("/", "_") + "_" + base_name if relative_folder else base_name
            )
        return DocumentRecord(
            source_path=Path("/src") / relative_folder / f"{base_name}.md",
            relative_folder=relative_folder,
            base_name=base_name,
            output_id=output_id,
            title=title or base_name,
            description="",
            raw_content=f"# {title or base_name}\n",
            modified_at=modified_at,
            byte_size=10,
        )

    return _make
