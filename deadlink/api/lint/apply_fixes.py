from collections.abc import Iterable

from .LintMessage import LintMessage


def apply_fixes(text: str, messages: Iterable[LintMessage]) -> tuple[str, list[LintMessage], list[LintMessage]]:
    """Apply the fixes attached to ``messages``.

    Fixes overlapping an earlier fix are skipped.

    Returns:
        (fixed text, messages whose fix was applied, messages left over)
    """
    applied: list[LintMessage] = []
    remaining: list[LintMessage] = []
    last_end = -1

    for message in sorted(messages, key=lambda m: (m.fix.range if m.fix else (m.index, m.index), m.message)):
        if message.fix is None or message.fix.range[0] < last_end:
            remaining.append(message)
            continue
        applied.append(message)
        last_end = message.fix.range[1]

    output = text
    for message in reversed(applied):
        start, end = message.fix.range  # type: ignore[union-attr]
        output = output[:start] + message.fix.text + output[end:]  # type: ignore[union-attr]

    return output, applied, remaining
