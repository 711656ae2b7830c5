from .FixCommand import FixCommand


class Fixer:
    """Builds fix descriptors for rule reports."""

    def replace_text_range(self, range: tuple[int, int], text: str) -> FixCommand:  # noqa: A002
        """Replace the node-relative ``range`` with ``text``."""
        start, end = range
        if start < 0 or end < start:
            raise ValueError(f"Invalid range: {range!r}")
        return FixCommand(range=(start, end), text=text)
