"""Static asset serving from a configured root directory."""

from __future__ import annotations

from pathlib import Path

from aiohttp import web

STATIC_ROOT_KEY: web.AppKey[Path] = web.AppKey("static_root", Path)

INDEX_FILE = "index.html"


def resolve_static_path(root: Path, relative: str) -> Path | None:
    """Map a request path onto a file below *root*.

    Directories resolve to their ``index.html``. Returns ``None`` when the
    target is missing, is a directory without an index, or escapes *root*.
    """
    try:
        candidate = (root / relative.lstrip("/")).resolve()
    except (OSError, ValueError):
        return None

    if not candidate.is_relative_to(root):
        return None

    if candidate.is_dir():
        candidate = candidate / INDEX_FILE

    if not candidate.is_file():
        return None
    return candidate


async def serve_static(request: web.Request) -> web.FileResponse:
    """Serve the requested file from the static root, or 404."""
    path = resolve_static_path(request.app[STATIC_ROOT_KEY], request.match_info["tail"])
    if path is None:
        raise web.HTTPNotFound()
    return web.FileResponse(path)
