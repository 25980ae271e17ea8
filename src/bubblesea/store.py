"""In-memory bubble store.

This is the only component allowed to touch the id -> bubble mapping.
"""

from __future__ import annotations

import threading

from bubblesea.exceptions import BubbleNotFoundError


class BubbleStore:
    """Process-wide mapping from bubble id to bubble value.

    Every read and write holds one lock, so concurrent writers to the same
    id leave exactly one of their values behind (last write wins).
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._lock = threading.Lock()
        self._bubbles: dict[str, str] = dict(initial or {})

    def put(self, bubble_id: str, value: str) -> None:
        """Store *value* for *bubble_id*, replacing any previous value."""
        with self._lock:
            self._bubbles[bubble_id] = value

    def get(self, bubble_id: str) -> str:
        """Return the bubble for *bubble_id*.

        Raises
        ------
        BubbleNotFoundError
            If nothing was ever written for *bubble_id*.
        """
        with self._lock:
            try:
                return self._bubbles[bubble_id]
            except KeyError:
                raise BubbleNotFoundError(bubble_id) from None

    def snapshot(self) -> dict[str, str]:
        with self._lock:
            return dict(self._bubbles)

    def __contains__(self, bubble_id: object) -> bool:
        with self._lock:
            return bubble_id in self._bubbles

    def __len__(self) -> int:
        with self._lock:
            return len(self._bubbles)
