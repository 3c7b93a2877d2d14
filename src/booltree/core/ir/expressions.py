"""
Boolean expression AST.

Three node variants make up a closed set:
- Terminal: a constant (0, 1) or a single-character variable
- UnaryExpr: ! operand
- BinaryExpr: left * right, left + right

Values flowing through evaluation are the characters "0" and "1", never
booleans or integers.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from booltree.core.errors import InvalidOperatorError, UndefinedVariableError

BIT_ZERO = "0"
BIT_ONE = "1"
BITS = (BIT_ZERO, BIT_ONE)

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class UnaryOp(StrEnum):
    """Unary operators."""

    NOT = "!"


class BinaryOp(StrEnum):
    """Binary operators."""

    AND = "*"
    OR = "+"


class NodeKind(StrEnum):
    """Node kinds as seen by tree renderers."""

    CONSTANT = "constant"
    UNARY_OPERATOR = "unary_operator"
    BINARY_OPERATOR = "binary_operator"


class RenderedNode(BaseModel):
    """Structural description of one AST node, addressed by ``id``."""

    id: str
    kind: NodeKind
    symbol: str
    children: list[RenderedNode] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Terminal(BaseModel):
    """A leaf: the constants 0 and 1, or a variable name."""

    symbol: str = Field(description="Single character: '0', '1' or an identifier")

    model_config = ConfigDict(frozen=True)

    @field_validator("symbol")
    @classmethod
    def _single_character(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError(f"Terminal symbol must be one character, got {v!r}")
        return v

    @property
    def is_constant(self) -> bool:
        return self.symbol in BITS

    def evaluate(self, context: Mapping[str, str]) -> str:
        if self.is_constant:
            return self.symbol
        if self.symbol not in context:
            raise UndefinedVariableError(self.symbol)
        return context[self.symbol]

    def linearize(self, accumulator: list[BinaryExpr]) -> None:
        """Leaves are never fragments."""

    def to_expression_string(self) -> str:
        return self.symbol

    def render(self, node_id: str) -> RenderedNode:
        return RenderedNode(id=node_id, kind=NodeKind.CONSTANT, symbol=self.symbol)

    def __str__(self) -> str:
        return self.to_expression_string()


class UnaryExpr(BaseModel):
    """Unary operation: op operand."""

    op: UnaryOp
    operand: Expr

    model_config = ConfigDict(frozen=True)

    def evaluate(self, context: Mapping[str, str]) -> str:
        if self.op != UnaryOp.NOT:
            raise InvalidOperatorError("Unary", self.op)
        if self.operand.evaluate(context) == BIT_ONE:
            return BIT_ZERO
        return BIT_ONE

    def linearize(self, accumulator: list[BinaryExpr]) -> None:
        # Only binary sub-expressions count as fragments; the unary node itself is skipped.
        self.operand.linearize(accumulator)

    def to_expression_string(self) -> str:
        return f"{self.op}{self.operand.to_expression_string()}"

    def render(self, node_id: str) -> RenderedNode:
        return RenderedNode(
            id=node_id,
            kind=NodeKind.UNARY_OPERATOR,
            symbol=str(self.op),
            children=[self.operand.render(node_id + "D")],
        )

    def __str__(self) -> str:
        return self.to_expression_string()


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def evaluate(self, context: Mapping[str, str]) -> str:
        # Both operands are always evaluated, so undefined variables surface
        # even when the first operand already decides the result.
        left = self.left.evaluate(context)
        right = self.right.evaluate(context)
        if self.op == BinaryOp.OR:
            return BIT_ONE if BIT_ONE in (left, right) else BIT_ZERO
        if self.op == BinaryOp.AND:
            return BIT_ZERO if BIT_ZERO in (left, right) else BIT_ONE
        raise InvalidOperatorError("Binary", self.op)

    def linearize(self, accumulator: list[BinaryExpr]) -> None:
        self.left.linearize(accumulator)
        self.right.linearize(accumulator)
        accumulator.append(self)

    def to_expression_string(self) -> str:
        return (
            f"({self.left.to_expression_string()}{self.op}{self.right.to_expression_string()})"
        )

    def render(self, node_id: str) -> RenderedNode:
        return RenderedNode(
            id=node_id,
            kind=NodeKind.BINARY_OPERATOR,
            symbol=str(self.op),
            children=[self.left.render(node_id + "L"), self.right.render(node_id + "R")],
        )

    def __str__(self) -> str:
        return self.to_expression_string()


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Terminal | UnaryExpr | BinaryExpr

# Rebuild models for recursive forward references
RenderedNode.model_rebuild()
UnaryExpr.model_rebuild()
BinaryExpr.model_rebuild()
