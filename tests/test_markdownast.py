import pytest

from quillmark.markdownast import (
    EMPTY_AST_TEXT,
    MarkdownAST,
    MarkdownNode,
    NodeType,
)


def _paragraph(start, end, text="text"):
    para = MarkdownNode(NodeType.PARAGRAPH, start, end)
    para.append_child(MarkdownNode(NodeType.TEXT, start, end, literal=text))
    return para


@pytest.fixture
def tree():
    doc = MarkdownNode(NodeType.DOCUMENT, 1, 12)
    nodes = {}
    nodes["para"] = doc.append_child(_paragraph(1, 2))
    heading = MarkdownNode(NodeType.HEADING, 4, 4, heading_level=1)
    heading.append_child(MarkdownNode(NodeType.TEXT, 4, 4, literal="Title"))
    nodes["heading"] = doc.append_child(heading)
    quote = doc.append_child(MarkdownNode(NodeType.BLOCK_QUOTE, 6, 8))
    nodes["quote"] = quote
    nodes["quote_para"] = quote.append_child(_paragraph(6, 8))
    lst = doc.append_child(MarkdownNode(NodeType.LIST, 10, 11))
    nodes["list"] = lst
    item = lst.append_child(MarkdownNode(NodeType.LIST_ITEM, 10, 10))
    item.append_child(_paragraph(10, 10))
    nodes["item"] = item
    nodes["item2"] = lst.append_child(MarkdownNode(NodeType.LIST_ITEM, 11, 11))
    return MarkdownAST(doc), nodes


def test_append_child_links_siblings():
    parent = MarkdownNode(NodeType.DOCUMENT)
    a = parent.append_child(MarkdownNode(NodeType.PARAGRAPH))
    b = parent.append_child(MarkdownNode(NodeType.PARAGRAPH))
    assert parent.first_child is a
    assert parent.last_child is b
    assert a.next is b and b.previous is a
    assert a.previous is None and b.next is None
    assert a.parent is parent
    assert parent.children() == [a, b]


def test_append_child_rejects_node_with_parent():
    first = MarkdownNode(NodeType.DOCUMENT)
    second = MarkdownNode(NodeType.DOCUMENT)
    child = first.append_child(MarkdownNode(NodeType.PARAGRAPH))
    with pytest.raises(ValueError):
        second.append_child(child)


def test_append_self_rejected():
    node = MarkdownNode(NodeType.DOCUMENT)
    with pytest.raises(ValueError):
        node.append_child(node)


@pytest.mark.parametrize(
    "node_type, expected",
    [
        (NodeType.PARAGRAPH, True),
        (NodeType.HEADING, True),
        (NodeType.TABLE_CELL, True),
        (NodeType.TEXT, False),
        (NodeType.EMPHASIS, False),
        (NodeType.LINK, False),
    ],
)
def test_is_block_type(node_type, expected):
    assert MarkdownNode(node_type).is_block_type() is expected


def test_find_block_in_paragraph(tree):
    ast, nodes = tree
    assert ast.find_block_at_line(1) is nodes["para"]
    assert ast.find_block_at_line(2) is nodes["para"]


def test_find_block_between_blocks_returns_none(tree):
    ast, _ = tree
    assert ast.find_block_at_line(3) is None


def test_find_block_descends_into_block_quote(tree):
    ast, nodes = tree
    assert ast.find_block_at_line(7) is nodes["quote_para"]


def test_find_block_stops_at_list_item(tree):
    ast, nodes = tree
    assert ast.find_block_at_line(10) is nodes["item"]
    assert ast.find_block_at_line(11) is nodes["item2"]


def test_find_block_heading(tree):
    ast, nodes = tree
    assert ast.find_block_at_line(4) is nodes["heading"]


def test_find_block_past_end_returns_none(tree):
    ast, _ = tree
    assert ast.find_block_at_line(50) is None


def test_find_block_open_ended_node():
    doc = MarkdownNode(NodeType.DOCUMENT)
    code = doc.append_child(MarkdownNode(NodeType.CODE_BLOCK, 3, 0))
    ast = MarkdownAST(doc)
    assert ast.find_block_at_line(100) is code
    assert ast.find_block_at_line(2) is None


def test_find_block_setext_heading_last_line_moves_on():
    doc = MarkdownNode(NodeType.DOCUMENT)
    heading = doc.append_child(MarkdownNode(NodeType.HEADING, 1, 3))
    heading.append_child(MarkdownNode(NodeType.TEXT, 1, 2, literal="x"))
    after = doc.append_child(MarkdownNode(NodeType.PARAGRAPH, 3, 4))
    ast = MarkdownAST(doc)
    assert ast.find_block_at_line(3) is after
    assert ast.find_block_at_line(2) is heading


def test_find_block_does_not_enter_table_cells():
    doc = MarkdownNode(NodeType.DOCUMENT)
    table = doc.append_child(MarkdownNode(NodeType.TABLE, 1, 3))
    row = table.append_child(MarkdownNode(NodeType.TABLE_ROW, 1, 1))
    row.append_child(MarkdownNode(NodeType.TABLE_CELL, 1, 1))
    assert MarkdownAST(doc).find_block_at_line(1) is row


def test_find_block_empty_and_invalid_root():
    assert MarkdownAST().find_block_at_line(1) is None
    invalid = MarkdownNode(NodeType.INVALID)
    invalid.append_child(_paragraph(1, 1))
    assert MarkdownAST(invalid).find_block_at_line(1) is None


def test_headings_only_top_level(tree):
    ast, nodes = tree
    nested = MarkdownNode(NodeType.HEADING, 6, 6)
    nodes["quote"].append_child(nested)
    headings = ast.headings()
    assert headings == [nodes["heading"]]
    assert nested not in headings


def test_headings_empty_and_invalid():
    assert MarkdownAST().headings() == []
    invalid = MarkdownNode(NodeType.INVALID)
    invalid.append_child(MarkdownNode(NodeType.HEADING, 1, 1))
    assert MarkdownAST(invalid).headings() == []


def test_clear(tree):
    ast, _ = tree
    ast.clear()
    assert ast.root is None
    assert ast.headings() == []
    assert ast.to_string() == EMPTY_AST_TEXT


def test_to_string_empty():
    assert MarkdownAST().to_string() == "AST is empty"


def test_to_string_indentation_and_order():
    doc = MarkdownNode(NodeType.DOCUMENT, 1, 3)
    first = doc.append_child(_paragraph(1, 1, "a"))
    second = doc.append_child(MarkdownNode(NodeType.THEMATIC_BREAK, 3, 3))
    text = MarkdownAST(doc).to_string()
    lines = text.splitlines()
    assert lines == [
        "->" + doc.to_string(),
        "   ->" + first.to_string(),
        "      ->" + first.first_child.to_string(),
        "   ->" + second.to_string(),
    ]
    assert text.endswith("\n")


def test_node_to_string_names_type_and_literal():
    node = MarkdownNode(NodeType.TEXT, 2, 2, literal="hello")
    description = node.to_string()
    assert description.startswith("TEXT")
    assert "hello" in description