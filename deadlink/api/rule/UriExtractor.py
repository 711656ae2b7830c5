"""URI extraction from traversed document nodes."""

from collections.abc import Callable

from ..node.is_child_node import is_child_node
from ..node.Syntax import Syntax
from ..node.TxtNode import TxtNode
from .Candidate import Candidate
from .URI_PATTERN import URI_PATTERN


class UriExtractor:
    """Accumulates URI candidates while a host walks the document tree."""

    def __init__(self, get_source: Callable[[TxtNode], str]):
        self.get_source = get_source
        self.candidates: list[Candidate] = []

    def on_str(self, node: TxtNode) -> None:
        if is_child_node(node, [Syntax.BLOCK_QUOTE]):
            return

        # The link target is already collected by on_link
        if is_child_node(node, [Syntax.LINK]):
            return

        text = self.get_source(node)
        for match in URI_PATTERN.finditer(text):
            self.candidates.append(Candidate(node=node, uri=match.group(0), index=match.start()))

    def on_link(self, node: TxtNode) -> None:
        if is_child_node(node, [Syntax.BLOCK_QUOTE]):
            return

        uri = node.url or ""
        # [text](http://example.com)
        #       ^
        index = node.raw.find(uri)
        self.candidates.append(Candidate(node=node, uri=uri, index=max(index, 0)))
