"""Typed page model and the assembly of index and document pages.

Assembly is pure: it turns documents, groups and rendered fragments into page
descriptions. Turning those into HTML text lives in :mod:`mdshelf.site.html`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from mdshelf.config import SiteConfig
from mdshelf.models import DocumentRecord, FolderGroup
from mdshelf.utils.text import anchor_id, format_date, format_size

INDEX_ID = "index"
NO_DATE = "-"


@dataclass(frozen=True, slots=True)
class NavLink:
    title: str
    href: str
    active: bool = False


@dataclass(frozen=True, slots=True)
class NavFolder:
    label: str
    links: tuple[NavLink, ...]


@dataclass(frozen=True, slots=True)
class Card:
    title: str
    description: str
    href: str
    updated: str
    size: str


@dataclass(frozen=True, slots=True)
class IndexSection:
    label: str
    anchor: str
    cards: tuple[Card, ...]

    @property
    def count(self) -> int:
        return len(self.cards)


@dataclass(frozen=True, slots=True)
class IndexPage:
    site_title: str
    subtitle: str
    footer: str
    lang: str
    stylesheet: str
    document_count: int
    group_count: int
    last_updated: str
    sections: tuple[IndexSection, ...]


@dataclass(frozen=True, slots=True)
class DocumentPage:
    site_title: str
    lang: str
    stylesheet: str
    title: str
    breadcrumb: str | None
    updated: str
    size: str
    body_html: str
    nav: tuple[NavFolder, ...]

    @property
    def page_title(self) -> str:
        return f"{self.title} - {self.site_title}"


def build_navigation(groups: Sequence[FolderGroup], active_id: str | None = None) -> tuple[NavFolder, ...]:
    """Sidebar entries for every group and document, in group order."""
    return tuple(
        NavFolder(
            label=group.label,
            links=tuple(
                NavLink(title=doc.title, href=doc.filename, active=doc.output_id == active_id)
                for doc in group.documents
            ),
        )
        for group in groups
    )


def _card(doc: DocumentRecord) -> Card:
    return Card(
        title=doc.title,
        description=doc.description,
        href=doc.filename,
        updated=format_date(doc.modified_at),
        size=format_size(doc.byte_size),
    )


def assemble_index_page(groups: Sequence[FolderGroup], config: SiteConfig) -> IndexPage:
    documents = [doc for group in groups for doc in group.documents]
    last_updated = (
        format_date(max(doc.modified_at for doc in documents)) if documents else NO_DATE
    )
    sections = tuple(
        IndexSection(
            label=group.label,
            anchor=anchor_id(group.label),
            cards=tuple(_card(doc) for doc in group.documents),
        )
        for group in groups
    )
    return IndexPage(
        site_title=config.site_title,
        subtitle=config.site_subtitle,
        footer=config.footer_text,
        lang=config.lang,
        stylesheet=config.stylesheet_name,
        document_count=len(documents),
        group_count=len(groups),
        last_updated=last_updated,
        sections=sections,
    )


def assemble_document_page(
    doc: DocumentRecord,
    body_html: str,
    groups: Sequence[FolderGroup],
    config: SiteConfig,
) -> DocumentPage:
    """Describe one document page; ``body_html`` is inserted verbatim."""
    breadcrumb = " / ".join(doc.relative_folder.split("/")) if not doc.is_root else None
    return DocumentPage(
        site_title=config.site_title,
        lang=config.lang,
        stylesheet=config.stylesheet_name,
        title=doc.title,
        breadcrumb=breadcrumb,
        updated=format_date(doc.modified_at),
        size=format_size(doc.byte_size),
        body_html=body_html,
        nav=build_navigation(groups, active_id=doc.output_id),
    )
