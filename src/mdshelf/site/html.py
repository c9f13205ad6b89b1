"""Render page models to HTML text."""

from __future__ import annotations

from html import escape

from mdshelf.site.pages import Card, DocumentPage, IndexPage, IndexSection, NavFolder

HOME_HREF = "index.html"

_SVG_OPEN = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" viewBox="0 0 24 24" '
    'fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">'
)
_FOLDER_PATH = (
    '<path d="M22 19a2 2 0 0 1-2 2H4a2 2 0 0 1-2-2V5a2 2 0 0 1 2-2h5l2 3h9a2 2 0 0 1 2 2z"></path>'
)
_DOCUMENT_PATHS = (
    '<path d="M14 2H6a2 2 0 0 0-2 2v16a2 2 0 0 0 2 2h12a2 2 0 0 0 2-2V8z"></path>'
    '<polyline points="14 2 14 8 20 8"></polyline>'
    '<line x1="16" y1="13" x2="8" y2="13"></line>'
    '<line x1="16" y1="17" x2="8" y2="17"></line>'
    '<polyline points="10 9 9 9 8 9"></polyline>'
)
_HOME_PATHS = (
    '<path d="M3 9l9-7 9 7v11a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"></path>'
    '<polyline points="9 22 9 12 15 12 15 22"></polyline>'
)


def _icon(paths: str, size: int = 24) -> str:
    return _SVG_OPEN.format(size=size) + paths + "</svg>"


def _head(lang: str, title: str, stylesheet: str) -> list[str]:
    return [
        "<!DOCTYPE html>",
        f'<html lang="{escape(lang)}">',
        "<head>",
        '  <meta charset="UTF-8">',
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"  <title>{escape(title)}</title>",
        f'  <link rel="stylesheet" href="{escape(stylesheet)}">',
        "</head>",
    ]


def _render_card(card: Card) -> str:
    return "\n".join(
        [
            f'        <a href="{escape(card.href)}" class="card">',
            f'          <div class="card-icon">{_icon(_DOCUMENT_PATHS)}</div>',
            f'          <h2 class="card-title">{escape(card.title)}</h2>',
            f'          <p class="card-description">{escape(card.description)}</p>',
            '          <div class="card-meta">',
            f'            <span class="card-date">{escape(card.updated)}</span>',
            f'            <span class="card-size">{escape(card.size)}</span>',
            "          </div>",
            "        </a>",
        ]
    )


def _render_section(section: IndexSection) -> str:
    return "\n".join(
        [
            f'    <section class="folder-section" id="{escape(section.anchor)}">',
            '      <h2 class="folder-title">',
            f"        {_icon(_FOLDER_PATH)}",
            f"        {escape(section.label)}",
            f'        <span class="folder-count">{section.count} 篇</span>',
            "      </h2>",
            '      <div class="cards-grid">',
            *(_render_card(card) for card in section.cards),
            "      </div>",
            "    </section>",
        ]
    )


def render_index_html(page: IndexPage) -> str:
    quick_links = [
        f'        <a href="#{escape(section.anchor)}" class="folder-nav-link">'
        f"{escape(section.label)} ({section.count})</a>"
        for section in page.sections
    ]
    lines = [
        *_head(page.lang, page.site_title, page.stylesheet),
        "<body>",
        '  <div class="container">',
        '    <header class="header">',
        f'      <h1 class="header-title">{escape(page.site_title)}</h1>',
        f'      <p class="header-subtitle">{escape(page.subtitle)}</p>',
        '      <div class="header-stats">',
        f'        <span class="stat">{page.document_count} 篇文档</span>',
        '        <span class="stat-divider">|</span>',
        f'        <span class="stat">{page.group_count} 个文件夹</span>',
        '        <span class="stat-divider">|</span>',
        f'        <span class="stat">最后更新: {escape(page.last_updated)}</span>',
        "      </div>",
        "    </header>",
        '    <nav class="folder-nav">',
        '      <h3 class="folder-nav-title">快速导航</h3>',
        '      <div class="folder-nav-links">',
        *quick_links,
        "      </div>",
        "    </nav>",
        '    <main class="main">',
        *(_render_section(section) for section in page.sections),
        "    </main>",
        '    <footer class="footer">',
        f"      <p>{escape(page.footer)}</p>",
        "    </footer>",
        "  </div>",
        "</body>",
        "</html>",
    ]
    return "\n".join(lines) + "\n"


def _render_nav_folder(folder: NavFolder) -> str:
    links = [
        f'          <a href="{escape(link.href)}" class="nav-link{" active" if link.active else ""}">'
        f"{escape(link.title)}</a>"
        for link in folder.links
    ]
    return "\n".join(
        [
            '      <div class="nav-folder">',
            '        <div class="nav-folder-header">',
            f"          {_icon(_FOLDER_PATH, size=16)}",
            f"          <span>{escape(folder.label)}</span>",
            "        </div>",
            '        <div class="nav-folder-content">',
            *links,
            "        </div>",
            "      </div>",
        ]
    )


def render_document_html(page: DocumentPage) -> str:
    breadcrumb = (
        [f'          <div class="doc-breadcrumb">{escape(page.breadcrumb)}</div>']
        if page.breadcrumb
        else []
    )
    lines = [
        *_head(page.lang, page.page_title, page.stylesheet),
        "<body>",
        '  <div class="doc-container">',
        '    <aside class="sidebar">',
        f'      <a href="{HOME_HREF}" class="sidebar-logo">',
        f"        {_icon(_HOME_PATHS)}",
        f"        <span>{escape(page.site_title)}</span>",
        "      </a>",
        '      <nav class="sidebar-nav">',
        '        <h3 class="nav-title">文档列表</h3>',
        *(_render_nav_folder(folder) for folder in page.nav),
        "      </nav>",
        "    </aside>",
        '    <main class="doc-main">',
        '      <article class="doc-content">',
        '        <header class="doc-header">',
        *breadcrumb,
        f"          <h1>{escape(page.title)}</h1>",
        '          <div class="doc-meta">',
        f"            <span>更新时间: {escape(page.updated)}</span>",
        f"            <span>文件大小: {escape(page.size)}</span>",
        "          </div>",
        "        </header>",
        '        <div class="markdown-body">',
        page.body_html,
        "        </div>",
        "      </article>",
        "    </main>",
        "  </div>",
        "</body>",
        "</html>",
    ]
    return "\n".join(lines) + "\n"
