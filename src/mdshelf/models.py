"""Core mdshelf data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class DocumentRecord:
    """One discovered Markdown document and its derived metadata."""

    source_path: Path
    relative_folder: str
    base_name: str
    output_id: str
    title: str
    description: str
    raw_content: str
    modified_at: float
    byte_size: int

    @property
    def filename(self) -> str:
        return f"{self.output_id}.html"

    @property
    def is_root(self) -> bool:
        return self.relative_folder == ""


@dataclass(slots=True)
class FolderGroup:
    """Documents sharing one relative folder, in incoming order."""

    key: str
    label: str
    documents: list[DocumentRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.documents)
