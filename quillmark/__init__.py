"""Export formats, command-line exporter definitions, find and replace,
Markdown documents and a block-level Markdown syntax tree."""

__version__ = "2.1.2"

__all__ = [
    "exportformat",
    "markdowndocument",
    "exporterfactory",
    "findreplace",
    "markdownast",
]