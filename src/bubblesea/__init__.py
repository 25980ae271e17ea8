"""bubblesea - Static file server with an in-memory bubble API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("bubblesea")
except PackageNotFoundError:
    __version__ = "0+local"
from bubblesea.app import create_app
from bubblesea.config import ServerConfig
from bubblesea.exceptions import (
    BindFailureError,
    BubbleConfigError,
    BubbleNotFoundError,
    BubbleSeaError,
    MalformedRequestBodyError,
)
from bubblesea.models import BubbleRead, BubbleWrite
from bubblesea.server import BubbleServer, serve
from bubblesea.store import BubbleStore

__all__ = [
    "__version__",
    "BindFailureError",
    "BubbleConfigError",
    "BubbleNotFoundError",
    "BubbleRead",
    "BubbleSeaError",
    "BubbleServer",
    "BubbleStore",
    "BubbleWrite",
    "MalformedRequestBodyError",
    "ServerConfig",
    "create_app",
    "serve",
]
