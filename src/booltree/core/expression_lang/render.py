"""
Tree rendering helpers.

Nodes are addressed by string ids derived from the caller's root id:
a unary operand is ``id + "D"``, binary children are ``id + "L"`` and
``id + "R"``. Tree drawers rely on this scheme to correlate the markup
emitted here with AST nodes.
"""

from __future__ import annotations

from html import escape

from booltree.core.ir.expressions import (
    BinaryExpr,
    Expr,
    NodeKind,
    RenderedNode,
    UnaryExpr,
)

DEFAULT_ROOT_ID = "Main"


def child_ids(expr: Expr, node_id: str) -> list[str]:
    """Ids of the direct children of ``expr``."""
    if isinstance(expr, UnaryExpr):
        return [node_id + "D"]
    if isinstance(expr, BinaryExpr):
        return [node_id + "L", node_id + "R"]
    return []


def _children(expr: Expr) -> list[Expr]:
    if isinstance(expr, UnaryExpr):
        return [expr.operand]
    if isinstance(expr, BinaryExpr):
        return [expr.left, expr.right]
    return []


def render_tree(expr: Expr, node_id: str = DEFAULT_ROOT_ID) -> RenderedNode:
    return expr.render(node_id)


def node_index(expr: Expr, node_id: str = DEFAULT_ROOT_ID) -> dict[str, Expr]:
    """Map every node id in the tree to its node, in pre-order."""
    index: dict[str, Expr] = {node_id: expr}
    for child, cid in zip(_children(expr), child_ids(expr, node_id), strict=True):
        index.update(node_index(child, cid))
    return index


def node_edges(expr: Expr, node_id: str = DEFAULT_ROOT_ID) -> list[tuple[str, str]]:
    """
    (parent id, child id) pairs, one per line the tree drawer connects.

    Order matches a pre-order walk: an edge is listed, then the subtree
    below it, left before right.
    """
    edges: list[tuple[str, str]] = []
    for child, cid in zip(_children(expr), child_ids(expr, node_id), strict=True):
        edges.append((node_id, cid))
        edges.extend(node_edges(child, cid))
    return edges


def to_html(
    expr: Expr,
    node_id: str = DEFAULT_ROOT_ID,
    padding: str = " ",
    indent: int = 0,
) -> str:
    """
    Render the tree as nested HTML tables.

    Each node becomes ``<span id="..." class="...">symbol</span>``; the class
    is the node kind (``constant``, ``unary_operator``, ``binary_operator``).
    Operators get a table whose header holds the operator and whose cells
    hold the children.
    """
    return "\n".join(_html_lines(expr.render(node_id), padding, indent))


def _span(node: RenderedNode) -> str:
    return (
        f'<span id="{escape(node.id)}" class="{node.kind}">{escape(node.symbol)}</span>'
    )


def _html_lines(node: RenderedNode, padding: str, indent: int) -> list[str]:
    def pad(extra: int) -> str:
        return padding * (indent + extra)

    if node.kind == NodeKind.CONSTANT:
        return [pad(0) + _span(node)]

    colspan = ' colspan="2"' if node.kind == NodeKind.BINARY_OPERATOR else ""
    lines = [
        pad(0) + '<table cellpadding="1" cellspacing="1">',
        pad(1) + "<tr>",
        pad(2) + f"<th{colspan}>{_span(node)}</th>",
        pad(1) + "</tr>",
        pad(1) + "<tr>",
    ]
    for child in node.children:
        lines.append(pad(2) + '<td valign="top">')
        lines.extend(_html_lines(child, padding, indent + 3))
        lines.append(pad(2) + "</td>")
    lines.append(pad(1) + "</tr>")
    lines.append(pad(0) + "</table>")
    return lines
