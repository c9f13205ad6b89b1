"""Document discovery: walk the source tree and load one record per file."""

from __future__ import annotations

import logging
from pathlib import Path, PurePath

from mdshelf.config import SiteConfig
from mdshelf.exceptions import InputAccessError
from mdshelf.ingestion.metadata import derive_output_id, extract_description, extract_title
from mdshelf.models import DocumentRecord
from mdshelf.utils.files import iter_markdown_paths

LOGGER = logging.getLogger(__name__)


def relative_folder_of(path: Path, root: Path) -> str:
    """Return the POSIX-style folder of ``path`` relative to ``root`` ("" at root level)."""
    parent = PurePath(path).parent.relative_to(root)
    return "" if parent == PurePath(".") else parent.as_posix()


def load_document(path: Path, root: Path, config: SiteConfig) -> DocumentRecord:
    """Read a document once and derive its metadata.

    Unreadable or undecodable files are fatal; a silently missing page is worse.
    """
    try:
        content = path.read_text(encoding="utf-8")
        stat = path.stat()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputAccessError(path, str(exc)) from exc

    base_name = path.name[: -len(config.extension)] if config.extension else path.stem
    folder = relative_folder_of(path, root)
    return DocumentRecord(
        source_path=path.resolve(),
        relative_folder=folder,
        base_name=base_name,
        output_id=derive_output_id(folder, base_name),
        title=extract_title(content, base_name),
        description=extract_description(
            content, max_chars=config.description_max_chars, ellipsis=config.ellipsis
        ),
        raw_content=content,
        modified_at=stat.st_mtime,
        byte_size=stat.st_size,
    )


def scan_documents(config: SiteConfig) -> list[DocumentRecord]:
    """Load every eligible document under ``config.root_dir``."""
    root = config.root_dir
    if not root.is_dir():
        raise InputAccessError(root, "root directory does not exist")

    paths = iter_markdown_paths(
        root,
        ignore_names=config.ignore_names,
        extension=config.extension,
        exclude=config.excluded_dirs(),
    )
    documents = [load_document(path, root, config) for path in paths]
    LOGGER.debug("Scanned %s documents under %s", len(documents), root)
    return documents
