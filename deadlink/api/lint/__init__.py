"""Lint API domain."""

from pydantic import BaseModel

from .LintMessage import LintFix, LintMessage


class LintCheckOutput(BaseModel):
    path: str
    messages: list[LintMessage]
    errors: list[str]


class LintFixOutput(BaseModel):
    path: str
    written: bool
    fixed: list[LintMessage]
    remaining: list[LintMessage]
    errors: list[str]


__all__ = [
    "LintCheckOutput",
    "LintFix",
    "LintFixOutput",
    "LintMessage",
]
