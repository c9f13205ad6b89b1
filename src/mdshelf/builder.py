"""Site build pipeline: scan, plan, emit."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from mdshelf.config import SiteConfig
from mdshelf.exceptions import IdentifierCollisionError, InputAccessError, OutputWriteError
from mdshelf.ingestion.scanner import scan_documents
from mdshelf.models import DocumentRecord, FolderGroup
from mdshelf.rendering.markup import MarkdownRenderer
from mdshelf.site.emitter import EmittedFile, emit_assets, emit_pages, load_stylesheet
from mdshelf.site.grouping import group_documents, sort_documents
from mdshelf.site.html import render_document_html, render_index_html
from mdshelf.site.pages import INDEX_ID, assemble_document_page, assemble_index_page
from mdshelf.utils.files import staged_directory

LOGGER = logging.getLogger(__name__)


def check_output_ids(documents: Sequence[DocumentRecord]) -> None:
    """Raise if two documents, or a document and the index, share a page name."""
    claims: dict[str, list[DocumentRecord]] = defaultdict(list)
    for doc in documents:
        claims[doc.output_id].append(doc)

    for output_id, docs in sorted(claims.items()):
        if len(docs) > 1 or output_id == INDEX_ID:
            raise IdentifierCollisionError(output_id, [doc.source_path for doc in docs])


@dataclass(slots=True)
class SitePlan:
    """Everything a build writes, fully rendered in memory."""

    documents: list[DocumentRecord]
    groups: list[FolderGroup]
    pages: dict[str, str]


@dataclass(slots=True)
class BuildStats:
    documents: int = 0
    groups: int = 0
    pages: int = 0
    assets: int = 0
    written_files: list[EmittedFile] = field(default_factory=list)


class SiteBuilder:
    """Coordinates discovery, page assembly and emission for one build."""

    def __init__(self, config: SiteConfig, renderer: MarkdownRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer or MarkdownRenderer()

    def scan(self) -> list[DocumentRecord]:
        return sort_documents(scan_documents(self.config))

    def plan(self, documents: Sequence[DocumentRecord]) -> SitePlan:
        """Render every page for already-sorted ``documents`` without touching disk."""
        check_output_ids(documents)
        groups = group_documents(documents, self.config.root_label, self.config.lang)
        LOGGER.info("Found %s markdown files in %s folders", len(documents), len(groups))

        pages: dict[str, str] = {}
        for doc in documents:
            body = self.renderer.render(doc.raw_content)
            page = assemble_document_page(doc, body, groups, self.config)
            pages[doc.filename] = render_document_html(page)
        pages[f"{INDEX_ID}.html"] = render_index_html(assemble_index_page(groups, self.config))
        pages[self.config.stylesheet_name] = load_stylesheet()
        return SitePlan(documents=list(documents), groups=groups, pages=pages)

    def _check_output_location(self, output_dir: Path) -> None:
        """The output directory is replaced wholesale, so it must not hold any input."""
        target = output_dir.resolve()
        inputs = [self.config.root_dir, self.config.asset_dir]
        for source in (Path(path).resolve() for path in inputs if path is not None):
            if source == target or source.is_relative_to(target):
                raise OutputWriteError(output_dir, f"output directory would replace input {source}")

    def build(self) -> BuildStats:
        """Run the whole pipeline; any failure aborts the build.

        Files are written to a staging directory that replaces the output
        directory only once everything succeeded.
        """
        asset_dir = self.config.asset_dir
        if asset_dir is not None and not asset_dir.is_dir():
            raise InputAccessError(asset_dir, "asset directory does not exist")
        output_dir = self.config.resolve_output_dir()
        self._check_output_location(output_dir)

        plan = self.plan(self.scan())
        stats = BuildStats(documents=len(plan.documents), groups=len(plan.groups))

        with staged_directory(output_dir) as staging:
            written = emit_pages(staging, plan.pages)
            stats.pages = sum(1 for name in plan.pages if name.endswith(".html"))
            if asset_dir is not None:
                copied = emit_assets(asset_dir, staging / self.config.asset_subdir)
                stats.assets = len(copied)
                written.extend(copied)

        stats.written_files.extend(
            EmittedFile(path=output_dir / item.path.relative_to(staging), sha256=item.sha256)
            for item in written
        )
        LOGGER.info("Build complete! Output in %s", output_dir)
        return stats
