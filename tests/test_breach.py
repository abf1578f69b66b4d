import asyncio

import httpx
import pytest

from pwcheck.analyzers.breach import (
    BreachChecker,
    parse_range_response,
    sha1_hex,
    split_hash,
)
from pwcore.network import PwHTTPError

from conftest import PASSWORD_PREFIX, PASSWORD_SUFFIX


def _check(checker: BreachChecker, password: str) -> int:
    async def run() -> int:
        async with checker:
            return await checker.check(password)

    return asyncio.run(run())


def test_sha1_hex_is_uppercase_40_digits():
    digest = sha1_hex("password")
    assert digest == PASSWORD_PREFIX + PASSWORD_SUFFIX
    assert len(digest) == 40


def test_split_hash():
    assert split_hash(sha1_hex("password")) == (PASSWORD_PREFIX, PASSWORD_SUFFIX)


def test_parse_range_response_matches_case_insensitively():
    body = f"AAAA:1\n{PASSWORD_SUFFIX.lower()}:42\n"
    assert parse_range_response(body, PASSWORD_SUFFIX) == 42


def test_parse_range_response_absent_suffix_is_zero():
    assert parse_range_response("AAAA:1\r\n\r\nBBBB:2", PASSWORD_SUFFIX) == 0
    assert parse_range_response("", PASSWORD_SUFFIX) == 0


def test_parse_range_response_bad_count_raises():
    with pytest.raises(ValueError):
        parse_range_response(f"{PASSWORD_SUFFIX}:lots", PASSWORD_SUFFIX)


def test_breached_password_returns_count(range_transport, requests_seen):
    checker = BreachChecker(transport=range_transport())
    assert _check(checker, "password") == 9545824

    (request,) = requests_seen
    assert request.method == "GET"
    assert request.url.path == f"/range/{PASSWORD_PREFIX}"


def test_only_prefix_leaves_the_process(range_transport, requests_seen):
    _check(BreachChecker(transport=range_transport()), "password")

    (request,) = requests_seen
    sent = str(request.url) + "".join(f"{k}:{v}" for k, v in request.headers.items())
    assert PASSWORD_SUFFIX not in sent.upper()
    assert str(request.url).endswith(f"/range/{PASSWORD_PREFIX}")


def test_unbreached_password_returns_zero(range_transport):
    assert _check(BreachChecker(transport=range_transport()), "Tr0ub4dor&3") == 0


def test_padding_header_is_configurable(range_transport, requests_seen):
    _check(BreachChecker(transport=range_transport()), "password")
    _check(BreachChecker(transport=range_transport(), padding=False), "password")

    assert requests_seen[0].headers["Add-Padding"] == "true"
    assert "Add-Padding" not in requests_seen[1].headers


@pytest.mark.parametrize("status", [404, 429, 500, 503])
def test_error_status_fails_open(range_transport, requests_seen, status):
    assert _check(BreachChecker(transport=range_transport(status=status)), "password") == 0
    assert len(requests_seen) == 1


@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectError("refused"),
        httpx.ReadTimeout("slow"),
    ],
)
def test_transport_failure_fails_open(range_transport, error):
    assert _check(BreachChecker(transport=range_transport(error=error)), "password") == 0


def test_malformed_body_fails_open(range_transport):
    transport = range_transport(body=f"{PASSWORD_SUFFIX}:not-a-number")
    assert _check(BreachChecker(transport=transport), "password") == 0


def test_lookup_propagates_failures(range_transport):
    checker = BreachChecker(transport=range_transport(status=503))

    async def run() -> None:
        async with checker:
            await checker.lookup("password")

    with pytest.raises(PwHTTPError) as excinfo:
        asyncio.run(run())
    assert excinfo.value.status_code == 503
