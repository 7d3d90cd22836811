"""A tree of Markdown nodes with searches by line and for headings."""

from __future__ import annotations

from enum import Enum, auto

__all__ = ["NodeType", "MarkdownNode", "MarkdownAST", "EMPTY_AST_TEXT"]

EMPTY_AST_TEXT = "AST is empty"


class NodeType(Enum):
    """Kinds of Markdown nodes."""

    INVALID = auto()
    DOCUMENT = auto()
    BLOCK_QUOTE = auto()
    LIST = auto()
    LIST_ITEM = auto()
    TASK_LIST_ITEM = auto()
    CODE_BLOCK = auto()
    HTML_BLOCK = auto()
    CUSTOM_BLOCK = auto()
    PARAGRAPH = auto()
    HEADING = auto()
    THEMATIC_BREAK = auto()
    FOOTNOTE_DEFINITION = auto()
    TABLE = auto()
    TABLE_ROW = auto()
    TABLE_CELL = auto()
    TEXT = auto()
    SOFT_BREAK = auto()
    LINE_BREAK = auto()
    CODE = auto()
    HTML_INLINE = auto()
    CUSTOM_INLINE = auto()
    EMPHASIS = auto()
    STRONG = auto()
    LINK = auto()
    IMAGE = auto()
    FOOTNOTE_REFERENCE = auto()
    STRIKETHROUGH = auto()


_BLOCK_TYPES = frozenset(
    {
        NodeType.DOCUMENT,
        NodeType.BLOCK_QUOTE,
        NodeType.LIST,
        NodeType.LIST_ITEM,
        NodeType.TASK_LIST_ITEM,
        NodeType.CODE_BLOCK,
        NodeType.HTML_BLOCK,
        NodeType.CUSTOM_BLOCK,
        NodeType.PARAGRAPH,
        NodeType.HEADING,
        NodeType.THEMATIC_BREAK,
        NodeType.FOOTNOTE_DEFINITION,
        NodeType.TABLE,
        NodeType.TABLE_ROW,
        NodeType.TABLE_CELL,
    }
)


class MarkdownNode:
    """A node of a Markdown syntax tree with its source position.

    Lines and columns are 1-based; an ``end_line`` of 0 means the node's
    end is not known and it extends to the end of the text.
    """

    def __init__(
        self,
        type: NodeType,
        start_line: int = 0,
        end_line: int = 0,
        *,
        start_column: int = 0,
        end_column: int = 0,
        literal: str | None = None,
        heading_level: int = 0,
    ) -> None:
        self.type = type
        self.start_line = start_line
        self.end_line = end_line
        self.start_column = start_column
        self.end_column = end_column
        self.literal = literal
        self.heading_level = heading_level
        self.parent: MarkdownNode | None = None
        self.first_child: MarkdownNode | None = None
        self.last_child: MarkdownNode | None = None
        self.next: MarkdownNode | None = None
        self.previous: MarkdownNode | None = None

    def __repr__(self) -> str:
        return f"MarkdownNode({self.to_string()})"

    def append_child(self, child: MarkdownNode) -> MarkdownNode:
        """Append ``child`` as the last child of this node and return it."""
        if child.parent is not None:
            raise ValueError("node already has a parent")
        if child is self:
            raise ValueError("a node cannot be its own child")
        child.parent = self
        child.previous = self.last_child
        child.next = None
        if self.last_child is None:
            self.first_child = child
        else:
            self.last_child.next = child
        self.last_child = child
        return child

    def children(self) -> list[MarkdownNode]:
        """Return the direct children in order."""
        result = []
        node = self.first_child
        while node is not None:
            result.append(node)
            node = node.next
        return result

    def is_block_type(self) -> bool:
        """Return True for block nodes, False for inline nodes."""
        return self.type in _BLOCK_TYPES

    def to_string(self) -> str:
        """Return a one-line description of the node for debugging."""
        text = (
            f"{self.type.name} "
            f"[{self.start_line}:{self.start_column}-{self.end_line}:{self.end_column}]"
        )
        if self.type is NodeType.HEADING:
            text += f" level={self.heading_level}"
        if self.literal is not None:
            text += f" {self.literal!r}"
        return text


class MarkdownAST:
    """A Markdown syntax tree that can be searched by line."""

    def __init__(self, root: MarkdownNode | None = None) -> None:
        self.root = root

    def _usable_root(self) -> MarkdownNode | None:
        if self.root is None or self.root.type is NodeType.INVALID:
            return None
        return self.root

    def find_block_at_line(self, line_number: int) -> MarkdownNode | None:
        """Return the deepest block node covering ``line_number``, or None."""
        root = self._usable_root()
        if root is None:
            return None

        candidate = None
        current = root.first_child

        while (
            current is not None
            and current.is_block_type()
            and current.type is not NodeType.TABLE_CELL
        ):
            covers = current.start_line <= line_number and (
                line_number <= current.end_line or current.end_line == 0
            )
            if covers:
                candidate = current
                if current.type in (NodeType.LIST_ITEM, NodeType.TASK_LIST_ITEM):
                    return candidate
                if current.type is NodeType.HEADING:
                    line_count = current.end_line - current.start_line + 1
                    if line_count > 2 and line_number == current.end_line:
                        current = current.next
                    else:
                        current = current.first_child
                else:
                    current = current.first_child
            elif current.start_line > line_number:
                return candidate
            else:
                current = current.next

        return candidate

    def headings(self) -> list[MarkdownNode]:
        """Return the top-level headings, excluding those nested in quotes or lists."""
        root = self._usable_root()
        if root is None:
            return []
        return [node for node in root.children() if node.type is NodeType.HEADING]

    def clear(self) -> None:
        """Drop the tree."""
        self.root = None

    def to_string(self) -> str:
        """Return an indented listing of the tree for debugging."""
        if self.root is None:
            return EMPTY_AST_TEXT

        lines = []
        stack: list[tuple[MarkdownNode, str]] = [(self.root, "")]
        while stack:
            node, indent = stack.pop()
            lines.append(f"{indent}->{node.to_string()}\n")
            child_indent = indent + "   "
            stack.extend(
                (child, child_indent) for child in reversed(node.children())
            )
        return "".join(lines)