"""Unit tests for deadlink.api.lint.Fixer and RuleContext."""

import pytest

from deadlink.api.lint.FixCommand import FixCommand
from deadlink.api.lint.Fixer import Fixer
from deadlink.api.lint.RuleContext import RuleContext
from deadlink.api.lint.RuleError import RuleError
from deadlink.api.node import parse_markdown


def test_replace_text_range():
    assert Fixer().replace_text_range((2, 5), "x") == FixCommand(range=(2, 5), text="x")


@pytest.mark.parametrize("bad_range", [(-1, 2), (5, 2)])
def test_replace_text_range_rejects_invalid_range(bad_range):
    with pytest.raises(ValueError, match="Invalid range"):
        Fixer().replace_text_range(bad_range, "x")


def test_context_get_source_and_report():
    text = "a [b](https://example.com/b)"
    link = parse_markdown(text).children[0].children[1]
    context = RuleContext(source=text)

    assert context.get_source(link) == "[b](https://example.com/b)"

    error = context.RuleError("problem", index=4)
    context.report(link, error)
    assert context.reports == [(link, RuleError("problem", index=4))]
