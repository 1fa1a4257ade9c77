"""Error taxonomy shared by the stores, the HTTP client, and the routes."""

from __future__ import annotations


class RainbowSnakeError(Exception):
    """Base class for all domain errors."""


class ValidationError(RainbowSnakeError):
    """Missing or malformed nickname or score."""


class ConflictError(RainbowSnakeError):
    """Nickname already reserved; carries a free alternative."""

    def __init__(self, message: str, suggestion: str) -> None:
        super().__init__(message)
        self.suggestion = suggestion


class TransportError(RainbowSnakeError):
    """The score service could not be reached or answered unexpectedly."""
