"""RuleError dataclass (UNO: single model)."""

from dataclasses import dataclass

from .FixCommand import FixCommand


@dataclass(frozen=True)
class RuleError:
    """Diagnostic payload a rule hands to ``context.report``.

    ``index`` and the fix range are relative to the reported node.
    """

    message: str
    index: int = 0
    fix: FixCommand | None = None
