"""Lint message models."""

from pydantic import BaseModel, ConfigDict


class LintFix(BaseModel):
    """A fix with an absolute, half-open character range."""

    model_config = ConfigDict(frozen=True)

    range: tuple[int, int]
    text: str


class LintMessage(BaseModel):
    """A diagnostic located in the document source."""

    model_config = ConfigDict(frozen=True)

    rule_id: str
    message: str
    index: int
    line: int
    column: int
    severity: str = "error"
    fix: LintFix | None = None
