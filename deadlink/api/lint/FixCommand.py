"""FixCommand dataclass (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FixCommand:
    """Replace ``range`` (half-open, character offsets) with ``text``."""

    range: tuple[int, int]
    text: str
