"""Shared pytest configuration and fixtures for all tests."""

from pathlib import Path

import httpx
import pytest


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without I/O beyond tmp_path")
    config.addinivalue_line("markers", "integration: CLI-level tests")
    config.addinivalue_line("markers", "config: configuration loading tests")


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def deadlink_home(tmp_path: Path, monkeypatch) -> Path:
    """Point DEADLINK_HOME at a temporary directory so no test touches ~/.deadlink."""
    home = tmp_path / ".deadlink"
    home.mkdir()
    monkeypatch.setenv("DEADLINK_HOME", str(home))
    return home


class FakeWeb:
    """Routes requests to canned responses and records every request made.

    Routes map a URL to a status code, a ``(status, headers)`` tuple, or an
    exception instance to raise. Unknown URLs raise ``httpx.ConnectError``.
    """

    def __init__(self, routes: dict | None = None):
        self.routes = dict(routes or {})
        self.calls: list[tuple[str, str]] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.calls.append((request.method, url))

        route = self.routes.get(url)
        if route is None:
            raise httpx.ConnectError("Name or service not known", request=request)
        if isinstance(route, Exception):
            raise route
        if isinstance(route, tuple):
            status, headers = route
            return httpx.Response(status, headers=headers)
        return httpx.Response(route)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_web():
    """Factory fixture: ``fake_web({url: status})`` returns a FakeWeb."""
    return FakeWeb


# =============================================================================
# Test Helpers
# =============================================================================


@pytest.fixture
def run_cmd():
    """Execute a cmd function and return the result with progress_callback executed."""

    def _run(cmd_func, *args, **kwargs):
        result = cmd_func(*args, **kwargs)
        list(result.progress_callback(result))
        return result

    return _run
