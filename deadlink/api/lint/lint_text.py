"""Run a rule over a Markdown document."""

import inspect
from typing import Any

import httpx

from ...utils.logger import get_logger
from ..config.RuleConfig import RuleConfig
from ..node.parse_markdown import parse_markdown
from ..node.Syntax import Syntax
from ..node.TxtNode import TxtNode
from ..rule.no_dead_link import rule as no_dead_link_rule
from .LintMessage import LintFix, LintMessage
from .RuleContext import RuleContext
from .RuleError import RuleError

logger = get_logger("lint.lint_text")


async def lint_text(
    text: str,
    options: RuleConfig | dict | None = None,
    *,
    rule: dict[str, Any] | None = None,
    rule_id: str = "no-dead-link",
    mode: str = "linter",
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float | None = None,
) -> list[LintMessage]:
    """Parse ``text``, drive the rule's visitor over it and collect diagnostics.

    Handlers are called depth-first in document order; the ``DOCUMENT_EXIT``
    handler runs after the whole tree was visited and is awaited before
    returning.

    Returns:
        Messages sorted by position, so repeated runs compare equal.
    """
    rule = rule or no_dead_link_rule
    document = parse_markdown(text)
    context = RuleContext(source=text, transport=transport, timeout=timeout)
    visitor = rule[mode](context, options)

    for node in document.walk():
        handler = visitor.get(node.type)
        if handler is not None:
            await _call(handler, node)

    exit_handler = visitor.get(Syntax.DOCUMENT_EXIT)
    if exit_handler is not None:
        await _call(exit_handler, document)

    messages = [_to_message(text, rule_id, node, error) for node, error in context.reports]
    logger.debug("%s reported %d message(s)", rule_id, len(messages))
    return sorted(messages, key=lambda m: (m.index, m.message))


async def _call(handler, node: TxtNode) -> None:
    result = handler(node)
    if inspect.isawaitable(result):
        await result


def _to_message(text: str, rule_id: str, node: TxtNode, error: RuleError) -> LintMessage:
    """Convert a node-relative report into an absolute, located message."""
    start = node.range[0]
    index = start + error.index
    line = text.count("\n", 0, index) + 1
    column = index - (text.rfind("\n", 0, index) + 1) + 1

    fix = None
    if error.fix is not None:
        fix_start, fix_end = error.fix.range
        fix = LintFix(range=(start + fix_start, start + fix_end), text=error.fix.text)

    return LintMessage(rule_id=rule_id, message=error.message, index=index, line=line, column=column, fix=fix)
