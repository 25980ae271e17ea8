"""Command-line entry point: ``python -m bubblesea``."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from bubblesea.config import ServerConfig
from bubblesea.exceptions import BindFailureError, BubbleConfigError
from bubblesea.server import serve

_logger = logging.getLogger(__name__)


def build_parser(defaults: ServerConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bubblesea",
        description="Serve static assets and the in-memory bubble API.",
    )
    parser.add_argument("--dir", default=defaults.static_dir, help="the directory for static assets")
    parser.add_argument("--addr", default=defaults.addr, help="the address to listen on")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default INFO)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser(ServerConfig.from_env()).parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = ServerConfig(static_dir=args.dir, addr=args.addr)
    try:
        asyncio.run(serve(config))
    except BubbleConfigError as exc:
        _logger.error("%s", exc)
        return 2
    except BindFailureError as exc:
        _logger.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        _logger.info("Shutting down...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
