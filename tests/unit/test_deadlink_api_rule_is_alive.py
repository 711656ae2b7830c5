"""Unit tests for deadlink.api.rule.is_alive."""

import asyncio

import httpx

from deadlink.api.rule.CheckResult import CheckResult
from deadlink.api.rule.is_alive import is_alive


def test_ok_response(fake_web):
    web = fake_web({"https://example.com/ok": 200})
    result = asyncio.run(is_alive("https://example.com/ok", transport=web.transport))

    assert result == CheckResult(ok=True, message="200 OK")
    assert web.calls == [("HEAD", "https://example.com/ok")]


def test_not_found(fake_web):
    web = fake_web({"https://example.com/gone": 404})
    result = asyncio.run(is_alive("https://example.com/gone", transport=web.transport))

    assert result.ok is False
    assert result.message == "404 Not Found"
    assert result.redirect is None


def test_method_is_passed_through(fake_web):
    web = fake_web({"https://example.com/ok": 200})
    asyncio.run(is_alive("https://example.com/ok", "GET", transport=web.transport))
    assert web.calls == [("GET", "https://example.com/ok")]


def test_moved_permanently_follows_to_final_url(fake_web):
    web = fake_web(
        {
            "https://example.com/old": (301, {"Location": "https://example.com/new"}),
            "https://example.com/new": 200,
        }
    )
    result = asyncio.run(is_alive("https://example.com/old", transport=web.transport))

    assert result == CheckResult(ok=True, redirect="https://example.com/new", message="301 Moved Permanently")
    assert web.calls == [
        ("HEAD", "https://example.com/old"),
        ("HEAD", "https://example.com/old"),
        ("HEAD", "https://example.com/new"),
    ]


def test_moved_permanently_to_dead_target(fake_web):
    web = fake_web(
        {
            "https://example.com/old": (301, {"Location": "https://example.com/new"}),
            "https://example.com/new": 410,
        }
    )
    result = asyncio.run(is_alive("https://example.com/old", transport=web.transport))

    assert result.ok is False
    assert result.redirect == "https://example.com/new"


def test_temporary_redirect_is_not_followed(fake_web):
    web = fake_web({"https://example.com/tmp": (302, {"Location": "https://example.com/other"})})
    result = asyncio.run(is_alive("https://example.com/tmp", transport=web.transport))

    assert result.ok is False
    assert result.message == "302 Found"
    assert web.calls == [("HEAD", "https://example.com/tmp")]


def test_network_error_becomes_result(fake_web):
    web = fake_web()
    result = asyncio.run(is_alive("https://unknown.example.com/x", transport=web.transport))

    assert result.ok is False
    assert result.message == "Name or service not known"


def test_malformed_host_becomes_result(fake_web):
    web = fake_web()
    result = asyncio.run(is_alive("https://xn--/x", transport=web.transport))

    assert result.ok is False
    assert result.message
    assert result.redirect is None


def test_unexpected_error_becomes_result(fake_web):
    web = fake_web({"https://example.com/crash": RuntimeError("unexpected")})
    result = asyncio.run(is_alive("https://example.com/crash", transport=web.transport))

    assert result == CheckResult(ok=False, message="unexpected")


def test_timeout_becomes_result(fake_web):
    web = fake_web({"https://example.com/slow": httpx.ReadTimeout("timed out")})
    result = asyncio.run(is_alive("https://example.com/slow", transport=web.transport))

    assert result == CheckResult(ok=False, message="timed out")


def test_error_without_text_uses_class_name(fake_web):
    web = fake_web({"https://example.com/x": httpx.RemoteProtocolError("")})
    result = asyncio.run(is_alive("https://example.com/x", transport=web.transport))

    assert result.message == "RemoteProtocolError"


def test_compression_is_disabled():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["accept-encoding"] = request.headers.get("accept-encoding")
        return httpx.Response(200)

    asyncio.run(is_alive("https://example.com/", transport=httpx.MockTransport(handler)))
    assert seen["accept-encoding"] == "identity"
