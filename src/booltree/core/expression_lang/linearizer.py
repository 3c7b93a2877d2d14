"""
Post-order flattening of an AST into its binary sub-expressions.

Each recorded fragment is a BinaryExpr; children come before parents and
left before right, so the root (when binary) is always last. Unary nodes
pass through to their operand without being recorded themselves.
"""

from __future__ import annotations

from booltree.core.ir.expressions import BinaryExpr, Expr


def linearize(expr: Expr) -> list[BinaryExpr]:
    """Return every binary sub-expression of ``expr`` in post-order."""
    fragments: list[BinaryExpr] = []
    expr.linearize(fragments)
    return fragments
