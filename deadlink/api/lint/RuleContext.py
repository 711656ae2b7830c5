"""Context handed to a rule for one document."""

from dataclasses import dataclass, field

import httpx

from ..node.Syntax import Syntax
from ..node.TxtNode import TxtNode
from .Fixer import Fixer
from .RuleError import RuleError


@dataclass
class RuleContext:
    """Capabilities a rule may use: node kinds, source access, reporting and fixes."""

    Syntax = Syntax
    RuleError = RuleError

    source: str
    transport: httpx.AsyncBaseTransport | None = None
    timeout: float | None = None
    fixer: Fixer = field(default_factory=Fixer)
    reports: list[tuple[TxtNode, RuleError]] = field(default_factory=list)

    def get_source(self, node: TxtNode) -> str:
        """Text of ``node`` as it appears in the document."""
        start, end = node.range
        return self.source[start:end]

    def report(self, node: TxtNode, error: RuleError) -> None:
        self.reports.append((node, error))
