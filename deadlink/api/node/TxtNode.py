"""Document node dataclass (UNO: single model)."""

from dataclasses import dataclass, field
from typing import Optional

from .Syntax import Syntax


@dataclass(eq=False)
class TxtNode:
    """A node of a parsed document.

    ``range`` holds absolute character offsets into the document source.
    """

    type: Syntax
    raw: str
    range: tuple[int, int]
    children: list["TxtNode"] = field(default_factory=list)
    parent: Optional["TxtNode"] = field(default=None, repr=False)
    url: str | None = None

    def append(self, child: "TxtNode") -> "TxtNode":
        child.parent = self
        self.children.append(child)
        return child

    def walk(self):
        """Yield this node and its descendants depth-first, in document order."""
        yield self
        for child in self.children:
            yield from child.walk()
