"""Custom exceptions for the Pterodactyl API client."""

from __future__ import annotations

POWER_OK = 0
POWER_FAILED = -1


class PanelAPIError(Exception):
    """Base exception for Pterodactyl panel API errors."""

    result = POWER_FAILED


class PanelTransportError(PanelAPIError):
    """The request could not be sent or the response never arrived."""


class PanelDecodeError(PanelAPIError):
    """Response body was not the JSON object the route returns."""


class PanelStatusError(PanelAPIError):
    """The panel answered with a non-2xx status."""

    kind = "unexpected status"

    def __init__(self, status_code: int, url: str = "") -> None:
        self.status_code = status_code
        self.url = url
        message = f"received {self.kind} error={status_code}"
        if url:
            message = f"{message} ({url})"
        super().__init__(message)


class PanelRedirectError(PanelStatusError):
    """3xx - redirects are reported, not followed."""

    kind = "redirection"


class PanelClientError(PanelStatusError):
    """4xx - bad token, unknown server, rejected signal."""

    kind = "client"


class PanelServerError(PanelStatusError):
    """5xx - the panel failed internally."""

    kind = "internal server"


def classify_status(status_code: int) -> type[PanelStatusError] | None:
    """Map a response status to the error it raises, or None on 2xx."""
    if 200 <= status_code < 300:
        return None
    if 300 <= status_code < 400:
        return PanelRedirectError
    if 400 <= status_code < 500:
        return PanelClientError
    if status_code >= 500:
        return PanelServerError
    return PanelStatusError
