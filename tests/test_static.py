from __future__ import annotations

from pathlib import Path

import pytest
from aiohttp.test_utils import TestClient, TestServer

from bubblesea.app import create_app
from bubblesea.config import ServerConfig
from bubblesea.static import resolve_static_path, serve_static


@pytest.fixture
def site(tmp_path: Path) -> Path:
    root = tmp_path / "dist"
    (root / "assets").mkdir(parents=True)
    (root / "index.html").write_text("<h1>home</h1>")
    (root / "assets" / "app.js").write_text("console.log(1);")
    (root / "empty").mkdir()
    (tmp_path / "secret.txt").write_text("outside")
    return root


def _client(root: Path) -> TestClient:
    return TestClient(TestServer(create_app(ServerConfig(static_dir=str(root)))))


def test_resolve_file_and_index(site: Path) -> None:
    root = site.resolve()
    assert resolve_static_path(root, "assets/app.js") == root / "assets" / "app.js"
    assert resolve_static_path(root, "") == root / "index.html"
    assert resolve_static_path(root, "/") == root / "index.html"


def test_resolve_rejects_missing_and_escapes(site: Path) -> None:
    root = site.resolve()
    assert resolve_static_path(root, "nope.txt") is None
    assert resolve_static_path(root, "empty") is None
    assert resolve_static_path(root, "../secret.txt") is None
    assert resolve_static_path(root, "/../secret.txt") is None
    assert resolve_static_path(root, "bad\x00name") is None


def test_resolve_rejects_symlink_escape(site: Path) -> None:
    (site / "link.txt").symlink_to(site.parent / "secret.txt")
    assert resolve_static_path(site.resolve(), "link.txt") is None


@pytest.mark.asyncio
async def test_serves_files_with_content_type(site: Path) -> None:
    async with _client(site) as client:
        resp = await client.get("/assets/app.js")
        assert resp.status == 200
        assert await resp.text() == "console.log(1);"
        assert "javascript" in resp.content_type

        resp = await client.get("/")
        assert resp.status == 200
        assert resp.content_type == "text/html"
        assert await resp.text() == "<h1>home</h1>"


@pytest.mark.asyncio
async def test_missing_file_is_404(site: Path) -> None:
    async with _client(site) as client:
        resp = await client.get("/missing.css")
        assert resp.status == 404

        resp = await client.get("/empty/")
        assert resp.status == 404


@pytest.mark.asyncio
async def test_missing_root_serves_404(tmp_path: Path) -> None:
    async with _client(tmp_path / "does-not-exist") as client:
        resp = await client.get("/index.html")
        assert resp.status == 404

        resp = await client.post("/api/bubble/abc", json={"Bubble": "still works"})
        assert resp.status == 200


@pytest.mark.asyncio
async def test_api_lookalike_paths_fall_through_to_static(site: Path) -> None:
    (site / "api").mkdir()
    (site / "api" / "readme.txt").write_text("static")
    async with _client(site) as client:
        resp = await client.get("/api/readme.txt")
        assert resp.status == 200
        assert await resp.text() == "static"

        resp = await client.get("/api/bubble/abc/extra")
        assert resp.status == 404


def test_serve_static_is_documented() -> None:
    assert serve_static.__doc__
