from collections.abc import Iterable

from .Syntax import Syntax
from .TxtNode import TxtNode


def is_child_node(node: TxtNode, kinds: Iterable[Syntax]) -> bool:
    """Return True if any ancestor of ``node`` has one of the given kinds."""
    wanted = set(kinds)
    parent = node.parent
    while parent is not None:
        if parent.type in wanted:
            return True
        parent = parent.parent
    return False
