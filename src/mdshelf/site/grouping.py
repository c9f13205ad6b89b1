"""Ordering and folder grouping of discovered documents."""

from __future__ import annotations

from typing import Iterable, Sequence

from mdshelf.models import DocumentRecord, FolderGroup
from mdshelf.utils.text import collation_key


def sort_documents(documents: Iterable[DocumentRecord]) -> list[DocumentRecord]:
    """Most recently modified first; folder and name break ties."""
    return sorted(
        documents,
        key=lambda doc: (-doc.modified_at, doc.relative_folder, doc.base_name),
    )


def group_documents(
    documents: Sequence[DocumentRecord], root_label: str, lang: str = "zh-CN"
) -> list[FolderGroup]:
    """Partition already-sorted documents by folder.

    Members keep their incoming order. The root group comes first, the remaining
    groups follow in collation order of their folder path under ``lang``.
    """
    groups: dict[str, FolderGroup] = {}
    for doc in documents:
        key = doc.relative_folder
        if key not in groups:
            groups[key] = FolderGroup(key=key, label=key or root_label)
        groups[key].documents.append(doc)

    return sorted(
        groups.values(),
        key=lambda group: (group.key != "", collation_key(group.key, lang)),
    )
