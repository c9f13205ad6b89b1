"""Command line interface for mdshelf."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from mdshelf.builder import SiteBuilder
from mdshelf.config import DEFAULT_IGNORE_NAMES, SiteConfig
from mdshelf.exceptions import MdshelfError
from mdshelf.site.grouping import group_documents
from mdshelf.utils.text import format_date, format_size

console = Console()
app = typer.Typer(help="mdshelf - build a static dashboard site from Markdown notes")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _ignore_names(extra: Optional[List[str]]) -> frozenset[str]:
    return DEFAULT_IGNORE_NAMES | frozenset(extra or [])


def _fail(exc: MdshelfError) -> typer.Exit:
    console.print(f"[red]Error:[/red] {exc}")
    return typer.Exit(code=1)


@app.command()
def build(
    root: Path = typer.Argument(Path("."), help="Directory containing Markdown files.", resolve_path=True),
    out: Path = typer.Option(None, "--out", help="Output directory (default: ROOT/dist)"),
    assets: Path = typer.Option(None, "--assets", help="Directory of binary assets to copy"),
    ignore: Optional[List[str]] = typer.Option(None, "--ignore", help="Extra directory names to skip"),
    root_label: str = typer.Option(SiteConfig().root_label, help="Group label for root-level documents"),
    title: str = typer.Option(SiteConfig().site_title, help="Site title"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Build the site: one page per document plus index and stylesheet."""
    _setup_logging(verbose)
    config = SiteConfig(
        root_dir=root,
        output_dir=out,
        asset_dir=assets,
        ignore_names=_ignore_names(ignore),
        root_label=root_label,
        site_title=title,
    )

    console.print(f"Building [bold]{root}[/bold] into [bold]{config.output_dir}[/bold]...")
    try:
        stats = SiteBuilder(config).build()
    except MdshelfError as exc:
        raise _fail(exc) from exc

    console.print(
        f"Documents: {stats.documents}, folders: {stats.groups}, "
        f"pages: {stats.pages}, assets: {stats.assets}"
    )
    if verbose:
        for emitted in stats.written_files:
            console.print(f"  {emitted.sha256[:12]}  {emitted.path}")


@app.command("list")
def list_documents(
    root: Path = typer.Argument(Path("."), help="Directory containing Markdown files.", resolve_path=True),
    ignore: Optional[List[str]] = typer.Option(None, "--ignore", help="Extra directory names to skip"),
    root_label: str = typer.Option(SiteConfig().root_label, help="Group label for root-level documents"),
) -> None:
    """Show the documents a build would publish, in navigation order."""
    config = SiteConfig(root_dir=root, ignore_names=_ignore_names(ignore), root_label=root_label)
    try:
        documents = SiteBuilder(config).scan()
    except MdshelfError as exc:
        raise _fail(exc) from exc

    if not documents:
        console.print("[yellow]No markdown files found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Page")
    table.add_column("Title")
    table.add_column("Folder")
    table.add_column("Updated")
    table.add_column("Size")

    for group in group_documents(documents, config.root_label, config.lang):
        for doc in group.documents:
            table.add_row(
                doc.filename, doc.title, group.label, format_date(doc.modified_at), format_size(doc.byte_size)
            )

    console.print(table)


@app.command()
def web(
    site: Path = typer.Option(Path("dist"), "--site", help="Built site directory"),
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
) -> None:
    """Preview a built site in the browser."""
    try:
        import uvicorn

        from mdshelf.web.app import create_app
    except ImportError as exc:  # pragma: no cover - depends on installed extras
        raise typer.BadParameter(
            "fastapi or uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    try:
        site_app = create_app(site)
    except MdshelfError as exc:
        raise _fail(exc) from exc

    console.print(f"Serving {site} on http://{host}:{port}")
    uvicorn.run(site_app, host=host, port=port, reload=False, log_level="info")
