"""Listener lifecycle: bind, serve until cancelled, clean up."""

from __future__ import annotations

import asyncio
import logging

from aiohttp import web

from bubblesea.app import create_app
from bubblesea.config import ServerConfig
from bubblesea.exceptions import BindFailureError
from bubblesea.store import BubbleStore

_logger = logging.getLogger(__name__)


class BubbleServer:
    """Runs the bubblesea application on a TCP listener.

    Usage::

        async with BubbleServer(config) as server:
            await server.serve_forever()
    """

    def __init__(self, config: ServerConfig, *, store: BubbleStore | None = None) -> None:
        self._config = config
        self._app = create_app(config, store=store)
        self._runner: web.AppRunner | None = None

    @property
    def app(self) -> web.Application:
        return self._app

    async def __aenter__(self) -> BubbleServer:
        await self.start()
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.stop()

    async def start(self) -> None:
        """Bind the listener.

        Raises
        ------
        BindFailureError
            If the address cannot be bound.
        """
        host, port = self._config.host, self._config.port
        runner = web.AppRunner(self._app)
        await runner.setup()
        site = web.TCPSite(runner, host, port)
        try:
            await site.start()
        except OSError as exc:
            await runner.cleanup()
            raise BindFailureError(
                f"Cannot listen on {self._config.addr}: {exc}",
                address=self._config.addr,
            ) from exc

        self._runner = runner
        _logger.info("Listening on %s", self._config.addr)
        _logger.info("Serving static assets from %s", self._config.static_dir)

    async def stop(self) -> None:
        if self._runner is not None:
            await self._runner.cleanup()
            self._runner = None

    async def serve_forever(self) -> None:
        if self._runner is None:
            raise RuntimeError("Server not started. Use 'async with BubbleServer(...) as server:'")
        await asyncio.Event().wait()


async def serve(config: ServerConfig) -> None:
    """Run a server for *config* until the task is cancelled."""
    async with BubbleServer(config) as server:
        await server.serve_forever()
