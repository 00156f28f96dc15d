from __future__ import annotations


class AIError(RuntimeError):
    pass


class ProviderError(AIError):
    """The provider answered, but the payload reports a failure."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ResponseShapeError(ProviderError):
    """A successful response did not match the schema expected for its endpoint."""


class TransportFailure(AIError):
    """The HTTP exchange itself failed: network error, non-JSON body or bad status."""
