"""Node kinds of a parsed document."""

from enum import Enum


class Syntax(str, Enum):
    DOCUMENT = "Document"
    DOCUMENT_EXIT = "Document:exit"
    PARAGRAPH = "Paragraph"
    HEADER = "Header"
    BLOCK_QUOTE = "BlockQuote"
    CODE_BLOCK = "CodeBlock"
    STR = "Str"
    LINK = "Link"
    IMAGE = "Image"
    CODE = "Code"
