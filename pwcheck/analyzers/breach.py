"""
Breach Corpus Lookup
====================

Checks a password against the Pwned Passwords corpus using the
k-anonymity range API:

1. SHA-1 the UTF-8 password and render it as 40 uppercase hex digits.
2. Send only the first five digits: ``GET /range/{prefix}``.
3. The service answers with every known ``SUFFIX:COUNT`` sharing that
   prefix; the suffix comparison happens locally.

The full hash never leaves the process. The lookup fails open: any
hashing, transport, status, or parsing failure is logged and reported as
zero breaches so the rest of the evaluation still completes.

References:
    - Have I Been Pwned, Pwned Passwords API v3.
      https://haveibeenpwned.com/API/v3#SearchingPwnedPasswordsByRange
    - Li, L. et al. (2019). Protocols for Checking Compromised
      Credentials. ACM CCS.
"""

from __future__ import annotations

import hashlib
from typing import Optional

import httpx

from pwcore.logger import PwLogger
from pwcore.network import PwHTTP, PwHTTPError

PREFIX_LENGTH = 5
DEFAULT_API_URL = "https://api.pwnedpasswords.com"


def sha1_hex(password: str) -> str:
    """Uppercase SHA-1 hex digest of the UTF-8 encoded *password*."""
    return hashlib.sha1(password.encode("utf-8")).hexdigest().upper()


def split_hash(digest: str) -> tuple[str, str]:
    """Split a hex digest into the transmitted prefix and the local suffix."""
    return digest[:PREFIX_LENGTH], digest[PREFIX_LENGTH:]


def parse_range_response(text: str, suffix: str) -> int:
    """Return the count recorded for *suffix* in a range response body.

    Lines look like ``0018A45C4D1DEF81644B54AB7F969B88D65:21``. Padding
    entries (count ``0``) and blank lines are harmless. Returns ``0`` when
    the suffix is absent.

    Raises:
        ValueError: If the matching line carries a non-integer count.
    """
    wanted = suffix.upper()
    for line in text.splitlines():
        candidate, sep, count = line.strip().partition(":")
        if sep and candidate.upper() == wanted:
            return int(count)
    return 0


class BreachChecker:
    """k-anonymity breach lookup that never raises.

    Usage::

        async with BreachChecker(timeout=5.0) as checker:
            count = await checker.check("P@ssw0rd")

    Args:
        api_url:    Base URL of the range API.
        timeout:    Request timeout in seconds.
        padding:    Ask the service to pad responses (``Add-Padding``) so
                    response size does not hint at the prefix.
        user_agent: User-Agent header value.
        transport:  httpx transport for the owned client (e.g. a mock).
        http:       Pre-built client used instead of an owned one. An
                    injected client is not closed by the checker.
        logger:     Logger to report failures to.
    """

    def __init__(
        self,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 5.0,
        padding: bool = True,
        user_agent: str = "pwcheck/1.0",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http: Optional[PwHTTP] = None,
        logger: Optional[PwLogger] = None,
    ) -> None:
        self._owns_http = http is None
        self._http = http or PwHTTP(
            base_url=api_url,
            timeout=timeout,
            user_agent=user_agent,
            headers={"Add-Padding": "true"} if padding else None,
            transport=transport,
        )
        self.logger = logger or PwLogger("breach")

    async def __aenter__(self) -> BreachChecker:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_http:
            await self._http.close()

    async def lookup(self, password: str) -> int:
        """Query the range API and return the breach count.

        Raises:
            PwHTTPError: On transport failure or non-2xx status.
            ValueError: On a malformed count in the response.
        """
        prefix, suffix = split_hash(sha1_hex(password))
        with self.logger.operation("range_lookup"):
            self.logger.debug("Querying range for prefix %s", prefix)
            body = await self._http.fetch_text(f"/range/{prefix}")
        return parse_range_response(body, suffix)

    async def check(self, password: str) -> int:
        """Breach count for *password*; ``0`` when absent or on any failure."""
        try:
            return await self.lookup(password)
        except PwHTTPError as exc:
            self.logger.warning("Breach lookup unavailable: %s", exc, status=exc.status_code)
        except Exception as exc:
            self.logger.warning(
                "Breach lookup failed: %s", type(exc).__name__, exc_info=True
            )
        return 0
