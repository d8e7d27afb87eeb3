"""Errors raised by the upstream API adapters."""

from typing import Any


class UpstreamAPIError(Exception):
    """An upstream provider call failed.

    Rendered by the app-level handler as ``{"message", "error", "details"}``
    with ``status_code`` as the HTTP status.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        error: str | None = None,
        details: Any = None,
    ):
        super().__init__(error or message)
        self.status_code = status_code
        self.message = message
        self.error = error or message
        self.details = details if details is not None else {}

    def to_dict(self) -> dict:
        return {"message": self.message, "error": self.error, "details": self.details}


class AmadeusAuthError(UpstreamAPIError):
    """The Amadeus token endpoint rejected us or could not be reached."""

    def __init__(self, error: str, status_code: int = 500, details: Any = None):
        super().__init__(
            status_code=status_code,
            message="Failed to authenticate with Amadeus API",
            error=error,
            details=details,
        )
