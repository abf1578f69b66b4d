"""
pwcore Async Network Client
===========================

Async HTTP client built on **httpx** used for the breach-corpus range
lookup. Each request is a single GET with an explicit timeout; every
transport, timeout, and status failure surfaces as one exception type,
:class:`PwHTTPError`.

References:
    - HTTPX documentation. https://www.python-httpx.org/
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger("pwcheck.network")


class PwHTTPError(Exception):
    """Raised for transport errors, timeouts, and non-success HTTP status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PwHTTP:
    """Async GET client with a base URL, timeout and default headers.

    Usage::

        async with PwHTTP(base_url="https://api.pwnedpasswords.com") as http:
            body = await http.fetch_text("/range/21BD1")

    Args:
        base_url:   Base URL prepended to relative paths.
        timeout:    Request timeout in seconds.
        headers:    Default HTTP headers merged into every request.
        user_agent: User-Agent header value.
        transport:  Optional httpx transport (e.g. ``httpx.MockTransport``).
    """

    def __init__(
        self,
        *,
        base_url: str = "",
        timeout: float = 5.0,
        headers: dict[str, str] | None = None,
        user_agent: str = "pwcheck/1.0",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        default_headers = {"User-Agent": user_agent}
        if headers:
            default_headers.update(headers)

        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=httpx.Timeout(timeout),
            headers=default_headers,
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self) -> PwHTTP:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    @property
    def closed(self) -> bool:
        return self._client.is_closed

    async def fetch(self, url: str) -> httpx.Response:
        """GET *url* once and return the 2xx response.

        Raises:
            PwHTTPError: On transport failure, timeout, or non-2xx status.
        """
        try:
            response = await self._client.get(url)
        except httpx.TransportError as exc:
            logger.debug("Transport error on GET %s: %s", url, exc)
            raise PwHTTPError(f"{type(exc).__name__} while requesting {url}") from exc

        if not response.is_success:
            raise PwHTTPError(
                f"HTTP {response.status_code} from {url}",
                status_code=response.status_code,
            )
        return response

    async def fetch_text(self, url: str) -> str:
        """Decoded body of :meth:`fetch`."""
        response = await self.fetch(url)
        return response.text
