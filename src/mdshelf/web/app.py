"""FastAPI application serving a built site for local preview."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from mdshelf import __version__
from mdshelf.exceptions import InputAccessError

LOGGER = logging.getLogger(__name__)


def create_app(site_dir: Path) -> FastAPI:
    """Build an app that serves ``site_dir`` with ``index.html`` at ``/``."""
    site_dir = Path(site_dir)
    if not site_dir.is_dir():
        raise InputAccessError(site_dir, "site directory does not exist, run 'mdshelf build' first")

    app = FastAPI(title="mdshelf preview", version=__version__)

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok", "site": str(site_dir)}

    # Mounted last so the explicit routes above take precedence.
    app.mount("/", StaticFiles(directory=site_dir, html=True), name="site")
    LOGGER.debug("Serving %s", site_dir)
    return app
