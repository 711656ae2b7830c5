"""Unit tests for deadlink.api.rule.is_relative."""

import pytest

from deadlink.api.rule.is_relative import is_relative


@pytest.mark.parametrize("uri", ["guide.md", "./guide.md", "../up/a.md", "/abs/path", "//cdn.example.com/x.js", ""])
def test_relative(uri):
    assert is_relative(uri) is True


@pytest.mark.parametrize("uri", ["https://example.com/", "http://example.com/a", "mailto:someone@example.com"])
def test_absolute(uri):
    assert is_relative(uri) is False
