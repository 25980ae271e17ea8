"""Application factory wiring the route table."""

from __future__ import annotations

from pathlib import Path

from aiohttp import web

from bubblesea.config import ServerConfig
from bubblesea.handlers import STORE_KEY, lookup_bubble, modify_bubble
from bubblesea.static import STATIC_ROOT_KEY, serve_static
from bubblesea.store import BubbleStore


def create_app(config: ServerConfig, *, store: BubbleStore | None = None) -> web.Application:
    """Build the aiohttp application.

    Routes, in match order::

        POST /api/bubble/{id}  -> modify_bubble
        GET  /api/bubble/{id}  -> lookup_bubble
        GET  /{tail:.*}        -> serve_static

    Parameters
    ----------
    config : ServerConfig
        Server configuration; only ``static_dir`` is read here.
    store : BubbleStore or None
        Store to serve from. A fresh empty store is created when omitted.
    """
    app = web.Application()
    app[STORE_KEY] = store if store is not None else BubbleStore()
    app[STATIC_ROOT_KEY] = Path(config.static_dir).resolve()

    app.router.add_post("/api/bubble/{id}", modify_bubble)
    app.router.add_get("/api/bubble/{id}", lookup_bubble)
    app.router.add_get("/{tail:.*}", serve_static)
    return app
