"""Candidate dataclass (UNO: single model)."""

from dataclasses import dataclass

from ..node.TxtNode import TxtNode


@dataclass(frozen=True)
class Candidate:
    """A discovered URI occurrence pending a liveness check."""

    node: TxtNode
    uri: str
    index: int  # offset of ``uri`` within the node's text
