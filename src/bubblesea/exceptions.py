"""Custom exception hierarchy for bubblesea."""

from __future__ import annotations


class BubbleSeaError(Exception):
    """Base exception for all bubblesea errors."""


class BubbleConfigError(BubbleSeaError):
    """Invalid or missing configuration."""


class MalformedRequestBodyError(BubbleSeaError):
    """Write body is not JSON or does not carry a string ``Bubble`` field."""

    def __init__(self, message: str, *, bubble_id: str = "") -> None:
        self.bubble_id = bubble_id
        super().__init__(message)


class BubbleNotFoundError(BubbleSeaError, KeyError):
    """No bubble has ever been written for the requested id.

    Distinct from a stored empty string: absence is never reported as ``""``.
    """

    def __init__(self, bubble_id: str) -> None:
        self.bubble_id = bubble_id
        super().__init__(f"No bubble stored for id {bubble_id!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class BindFailureError(BubbleSeaError):
    """The HTTP listener could not be started (address in use, permissions)."""

    def __init__(self, message: str, *, address: str = "") -> None:
        self.address = address
        super().__init__(message)
