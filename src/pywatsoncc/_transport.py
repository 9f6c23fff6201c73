"""HTTP transport for the captioning server."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import aiohttp

from pywatsoncc.exceptions import (
    WatsonDecodeError,
    WatsonProtocolError,
    WatsonTimeoutError,
    WatsonTransportError,
)
from pywatsoncc.models.endpoint import RemoteEndpoint

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the poller and dispatcher.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def get(self, path: str) -> None:
        ...

    async def get_json(self, path: str) -> Any:
        ...


class HttpTransport:
    """Issue GET requests against one :class:`RemoteEndpoint`.

    Every failure is raised as a :class:`WatsonTransportError` subclass;
    callers never see raw ``aiohttp`` exceptions.
    """

    def __init__(
        self,
        endpoint: RemoteEndpoint,
        http_session: aiohttp.ClientSession,
        *,
        timeout: float,
    ) -> None:
        self._endpoint = endpoint
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    @property
    def endpoint(self) -> RemoteEndpoint:
        return self._endpoint

    async def _request(self, path: str) -> bytes:
        url = self._endpoint.url(path)
        # ssl=False skips certificate verification entirely.
        ssl = self._endpoint.reject_unauthorized

        _logger.debug("GET %s", url)

        try:
            async with self._http.get(url, ssl=ssl, timeout=self._timeout) as resp:
                body = await resp.read()
                if not 200 <= resp.status < 300:
                    raise WatsonProtocolError(
                        f"HTTP {resp.status} from {path}: {_preview(body)}",
                        status_code=resp.status,
                        endpoint=path,
                    )
        except WatsonTransportError:
            raise
        except TimeoutError as exc:
            raise WatsonTimeoutError("timeout", endpoint=path) from exc
        except aiohttp.ClientError as exc:
            raise WatsonTransportError(
                f"Request to {path} failed: {exc}",
                endpoint=path,
            ) from exc

        return body

    async def get(self, path: str) -> None:
        """Send a command; only the status code matters, the body is ignored."""
        await self._request(path)

    async def get_json(self, path: str) -> Any:
        """Fetch *path* and decode its body as UTF-8 JSON."""
        body = await self._request(path)
        try:
            return json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, ValueError, RecursionError) as exc:
            raise WatsonDecodeError(
                f"Invalid JSON from {path}: {_preview(body)}",
                endpoint=path,
            ) from exc


def _preview(body: bytes, limit: int = 200) -> str:
    """Lossy text excerpt of *body* for error messages."""
    return body[:limit].decode("utf-8", errors="replace")
