"""Shared fixtures: a fake range API served through httpx.MockTransport."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from pwcore.config import PwConfig

# SHA-1("password") = 5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8
PASSWORD_PREFIX = "5BAA6"
PASSWORD_SUFFIX = "1E4C9B93F3F0682250B6CF8331B7EE68FD8"

RANGE_BODY = "\r\n".join([
    "003D68EB55068C33ACE09247EE4C639306B:3",
    f"{PASSWORD_SUFFIX}:9545824",
    "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF:0",
])


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def range_transport(requests_seen: list[httpx.Request]) -> Callable[..., httpx.MockTransport]:
    """Factory for a transport answering ``/range/{prefix}``.

    ``status`` and ``body`` override the response; ``error`` raises the
    given exception instead of answering.
    """

    def factory(
        *,
        status: int = 200,
        body: str = RANGE_BODY,
        error: Exception | None = None,
    ) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            if error is not None:
                raise error
            return httpx.Response(status, text=body)

        return httpx.MockTransport(handler)

    return factory


@pytest.fixture
def offline_config() -> PwConfig:
    config = PwConfig()
    config.evaluator.breach_check = False
    return config
