"""Custom exception hierarchy for pywatsoncc."""

from __future__ import annotations


class WatsonError(Exception):
    """Base exception for all pywatsoncc errors."""


class WatsonConfigError(WatsonError):
    """Invalid or missing configuration."""


class WatsonTransportError(WatsonError):
    """HTTP-level failure (network, TLS, non-2xx, undecodable body)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class WatsonTimeoutError(WatsonTransportError):
    """The request did not complete within the configured timeout."""


class WatsonProtocolError(WatsonTransportError):
    """The server answered with a non-2xx status code."""


class WatsonDecodeError(WatsonTransportError):
    """The status body is not a well-formed JSON object.

    Raised before anything is merged into the variable store, so a
    malformed snapshot never results in a partial update.
    """
