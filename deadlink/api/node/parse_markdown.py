"""Markdown document parser.

Builds a TxtNode tree from Markdown source, one block at a time.
Note: This is not a full CommonMark parser but sufficient for locating
links, the prose around them, and the containers that exempt them.
"""

import re

from .Syntax import Syntax
from .TxtNode import TxtNode

# Compiled regex patterns
BLANK_LINE_PATTERN = re.compile(r"^\s*$")
FENCE_PATTERN = re.compile(r"^ {0,3}(`{3,}|~{3,})")
HEADER_PATTERN = re.compile(r"^ {0,3}#{1,6}(?:[ \t]+|$)")
QUOTE_PATTERN = re.compile(r"^ {0,3}>")
# Link target: one level of balanced parentheses, optional title
TARGET = r"(?:[^()\s]|\([^()\s]*\))+"
TITLE = r"(?:\s+\"[^\"]*\")?"
INLINE_PATTERN = re.compile(
    rf"(?P<code>`+)(?P<code_body>.+?)(?P=code)"
    rf"|(?P<image>!\[[^\]]*\]\((?P<src>{TARGET}){TITLE}\))"
    rf"|(?P<link>\[(?P<text>(?:!\[[^\]]*\]\({TARGET}{TITLE}\)|[^\]])*)\]\((?P<url>{TARGET}){TITLE}\))"
    rf"|(?P<autolink><(?P<auto_url>[a-zA-Z][a-zA-Z0-9+.-]*:[^\s<>]+)>)"
)


def parse_markdown(text: str) -> TxtNode:
    """Parse Markdown text into a tree rooted at a ``Syntax.DOCUMENT`` node."""
    document = TxtNode(type=Syntax.DOCUMENT, raw=text, range=(0, len(text)))

    for kind, start, end in _iter_blocks(text):
        raw = text[start:end]
        if kind is Syntax.CODE_BLOCK:
            document.append(TxtNode(type=Syntax.CODE_BLOCK, raw=raw, range=(start, end)))
        elif kind is Syntax.HEADER:
            header = document.append(TxtNode(type=Syntax.HEADER, raw=raw, range=(start, end)))
            marker = HEADER_PATTERN.match(raw)
            _parse_inline(header, text, start + (marker.end() if marker else 0), end)
        elif kind is Syntax.BLOCK_QUOTE:
            quote = document.append(TxtNode(type=Syntax.BLOCK_QUOTE, raw=raw, range=(start, end)))
            paragraph = quote.append(TxtNode(type=Syntax.PARAGRAPH, raw=raw, range=(start, end)))
            _parse_inline(paragraph, text, start, end)
        else:
            paragraph = document.append(TxtNode(type=Syntax.PARAGRAPH, raw=raw, range=(start, end)))
            _parse_inline(paragraph, text, start, end)

    return document


def _iter_blocks(text: str):
    """Yield ``(kind, start, end)`` for each block, trailing newline excluded."""
    lines = text.splitlines(keepends=True)
    offset = 0
    i = 0
    while i < len(lines):
        line = lines[i]
        if BLANK_LINE_PATTERN.match(line):
            offset += len(line)
            i += 1
            continue

        start = offset
        fence = FENCE_PATTERN.match(line)
        if fence:
            marker = fence.group(1)
            offset += len(line)
            i += 1
            while i < len(lines):
                closing = lines[i]
                offset += len(closing)
                i += 1
                if closing.strip().startswith(marker):
                    break
            yield Syntax.CODE_BLOCK, start, start + len(text[start:offset].rstrip("\r\n"))
            continue

        if HEADER_PATTERN.match(line):
            offset += len(line)
            i += 1
            yield Syntax.HEADER, start, start + len(line.rstrip("\r\n"))
            continue

        kind = Syntax.BLOCK_QUOTE if QUOTE_PATTERN.match(line) else Syntax.PARAGRAPH
        offset += len(line)
        i += 1
        while i < len(lines):
            following = lines[i]
            if BLANK_LINE_PATTERN.match(following) or FENCE_PATTERN.match(following):
                break
            if kind is Syntax.PARAGRAPH and (HEADER_PATTERN.match(following) or QUOTE_PATTERN.match(following)):
                break
            offset += len(following)
            i += 1
        yield kind, start, start + len(text[start:offset].rstrip("\r\n"))


def _parse_inline(parent: TxtNode, text: str, start: int, end: int) -> None:
    """Append inline nodes for ``text[start:end]`` to ``parent``."""
    pos = start
    for match in INLINE_PATTERN.finditer(text, start, end):
        if match.start() > pos:
            parent.append(_str_node(text, pos, match.start()))

        node_range = (match.start(), match.end())
        if match.group("code"):
            parent.append(TxtNode(type=Syntax.CODE, raw=match.group(0), range=node_range))
        elif match.group("image"):
            parent.append(TxtNode(type=Syntax.IMAGE, raw=match.group(0), range=node_range, url=match.group("src")))
        elif match.group("link"):
            link = parent.append(TxtNode(type=Syntax.LINK, raw=match.group(0), range=node_range, url=match.group("url")))
            if match.group("text"):
                _parse_inline(link, text, match.start("text"), match.end("text"))
        else:
            link = parent.append(
                TxtNode(type=Syntax.LINK, raw=match.group(0), range=node_range, url=match.group("auto_url"))
            )
            link.append(_str_node(text, match.start("auto_url"), match.end("auto_url")))

        pos = match.end()

    if pos < end:
        parent.append(_str_node(text, pos, end))


def _str_node(text: str, start: int, end: int) -> TxtNode:
    return TxtNode(type=Syntax.STR, raw=text[start:end], range=(start, end))
