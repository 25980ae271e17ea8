"""Server configuration for bubblesea."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from bubblesea.exceptions import BubbleConfigError

DEFAULT_STATIC_DIR = "../frontend/dist"
DEFAULT_ADDR = "127.0.0.1:4000"


def parse_addr(addr: str) -> tuple[str | None, int]:
    """Split a ``host:port`` listen address.

    Accepts ``host:port``, ``[ipv6]:port`` and ``:port``. An empty host
    means "all interfaces" and is returned as ``None``.

    Raises
    ------
    BubbleConfigError
        If the port is missing, not numeric, or out of range.
    """
    host, sep, port_text = addr.strip().rpartition(":")
    if not sep:
        raise BubbleConfigError(f"Listen address {addr!r} is missing a port (expected host:port)")

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]

    try:
        port = int(port_text)
    except ValueError as exc:
        raise BubbleConfigError(f"Invalid port in listen address {addr!r}") from exc
    if not 0 <= port <= 65535:
        raise BubbleConfigError(f"Port out of range in listen address {addr!r}")

    return (host or None), port


@dataclasses.dataclass(frozen=True)
class ServerConfig:
    """Server configuration.

    Parameters
    ----------
    static_dir : str
        Root directory for static assets.
    addr : str
        Address to listen on, as ``host:port``.
    """

    static_dir: str = DEFAULT_STATIC_DIR
    addr: str = DEFAULT_ADDR

    @property
    def host(self) -> str | None:
        return parse_addr(self.addr)[0]

    @property
    def port(self) -> int:
        return parse_addr(self.addr)[1]

    @classmethod
    def from_env(cls, **overrides: Any) -> ServerConfig:
        """Create configuration from environment variables.

        Reads ``BUBBLESEA_DIR`` and ``BUBBLESEA_ADDR``. Explicit keyword
        arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "BUBBLESEA_DIR": "static_dir",
            "BUBBLESEA_ADDR": "addr",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
