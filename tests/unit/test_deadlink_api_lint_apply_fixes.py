"""Unit tests for deadlink.api.lint.apply_fixes."""

from deadlink.api.lint import LintFix, LintMessage
from deadlink.api.lint.apply_fixes import apply_fixes


def _message(index, fix_range=None, text="", message="m"):
    fix = LintFix(range=fix_range, text=text) if fix_range else None
    return LintMessage(rule_id="no-dead-link", message=message, index=index, line=1, column=index + 1, fix=fix)


def test_applies_fixes_back_to_front():
    text = "aa OLD bb OLD cc"
    first = _message(3, (3, 6), "NEW1")
    second = _message(10, (10, 13), "NEW22")

    fixed, applied, remaining = apply_fixes(text, [second, first])

    assert fixed == "aa NEW1 bb NEW22 cc"
    assert applied == [first, second]
    assert remaining == []


def test_overlapping_fix_is_skipped():
    text = "0123456789"
    kept = _message(2, (2, 6), "X")
    overlapping = _message(4, (4, 8), "Y")

    fixed, applied, remaining = apply_fixes(text, [kept, overlapping])

    assert fixed == "01X6789"
    assert applied == [kept]
    assert remaining == [overlapping]


def test_messages_without_fix_are_remaining():
    dead = _message(0)
    fixed, applied, remaining = apply_fixes("text", [dead])

    assert fixed == "text"
    assert applied == []
    assert remaining == [dead]
