"""Tests for tree rendering and node addressing."""

from __future__ import annotations

from booltree.core.expression_lang.parser import parse_expr
from booltree.core.expression_lang.render import node_edges, node_index, render_tree, to_html
from booltree.core.ir.expressions import NodeKind, Terminal


class TestRenderTree:
    """render() addresses children as id+D, id+L and id+R."""

    def test_terminal(self) -> None:
        node = render_tree(parse_expr("a"), "Main")
        assert node.id == "Main"
        assert node.kind == NodeKind.CONSTANT
        assert node.children == []

    def test_unary_child_id(self) -> None:
        node = render_tree(parse_expr("!a"), "Main")
        assert node.kind == NodeKind.UNARY_OPERATOR
        assert [c.id for c in node.children] == ["MainD"]

    def test_binary_child_ids(self) -> None:
        node = render_tree(parse_expr("!a+b"), "Main")
        assert node.kind == NodeKind.BINARY_OPERATOR
        assert node.symbol == "+"
        left, right = node.children
        assert (left.id, right.id) == ("MainL", "MainR")
        assert left.children[0].id == "MainLD"
        assert left.children[0].symbol == "a"

    def test_caller_root_id(self) -> None:
        node = render_tree(parse_expr("a*b"), "subRoot0")
        assert [c.id for c in node.children] == ["subRoot0L", "subRoot0R"]


class TestNodeAddressing:
    """node_index and node_edges follow the same id scheme."""

    def test_index_is_pre_order(self) -> None:
        index = node_index(parse_expr("!a+b"))
        assert list(index) == ["Main", "MainL", "MainLD", "MainR"]
        assert index["MainLD"] == Terminal(symbol="a")

    def test_edges(self) -> None:
        assert node_edges(parse_expr("!a+b")) == [
            ("Main", "MainL"),
            ("MainL", "MainLD"),
            ("Main", "MainR"),
        ]

    def test_terminal_has_no_edges(self) -> None:
        assert node_edges(parse_expr("1")) == []


class TestHtml:
    """to_html emits nested tables with addressable spans."""

    def test_terminal(self) -> None:
        assert to_html(parse_expr("a")) == '<span id="Main" class="constant">a</span>'

    def test_unary(self) -> None:
        assert to_html(parse_expr("!a")).split("\n") == [
            '<table cellpadding="1" cellspacing="1">',
            " <tr>",
            '  <th><span id="Main" class="unary_operator">!</span></th>',
            " </tr>",
            " <tr>",
            '  <td valign="top">',
            '   <span id="MainD" class="constant">a</span>',
            "  </td>",
            " </tr>",
            "</table>",
        ]

    def test_binary_header_spans_both_children(self) -> None:
        html = to_html(parse_expr("a*b"), "T")
        assert '<th colspan="2"><span id="T" class="binary_operator">*</span></th>' in html
        assert '<span id="TL" class="constant">a</span>' in html
        assert '<span id="TR" class="constant">b</span>' in html
        assert html.index('id="TL"') < html.index('id="TR"')

    def test_symbols_are_escaped(self) -> None:
        assert "&lt;" in to_html(parse_expr("<"))
