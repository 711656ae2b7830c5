"""Document node tree: kinds, nodes and the Markdown parser."""

from .is_child_node import is_child_node
from .parse_markdown import parse_markdown
from .Syntax import Syntax
from .TxtNode import TxtNode

__all__ = ["Syntax", "TxtNode", "is_child_node", "parse_markdown"]
