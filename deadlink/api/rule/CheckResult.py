"""CheckResult dataclass (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single liveness check."""

    ok: bool
    message: str
    redirect: str | None = None
