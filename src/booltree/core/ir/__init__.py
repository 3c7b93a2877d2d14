"""
Intermediate representation for boolean expressions.
"""

from .expressions import (
    BIT_ONE,
    BIT_ZERO,
    BITS,
    BinaryExpr,
    BinaryOp,
    Expr,
    NodeKind,
    RenderedNode,
    Terminal,
    UnaryExpr,
    UnaryOp,
)

__all__ = [
    "BIT_ONE",
    "BIT_ZERO",
    "BITS",
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "NodeKind",
    "RenderedNode",
    "Terminal",
    "UnaryExpr",
    "UnaryOp",
]
