"""
Expression evaluator for boolean expressions.

Evaluates an AST against a variable assignment (dict of name -> bit).
Pure evaluation: the tree is never mutated and nothing is cached, so the
same tree can be evaluated under any number of contexts.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from booltree.core.errors import (
    EvaluationTooDeepError,
    InvalidBitValueError,
    InvalidVariableNameError,
)
from booltree.core.ir.expressions import BIT_ONE, BIT_ZERO, BITS, BinaryExpr, Expr

logger = logging.getLogger(__name__)

TOO_DEEP_MESSAGE = "Expression nests too deeply to evaluate"


def to_bit(symbol: str, value: Any) -> str:
    """Coerce a context value to "0" or "1"."""
    if isinstance(value, str) and value in BITS:
        return value
    if isinstance(value, bool):
        return BIT_ONE if value else BIT_ZERO
    if isinstance(value, int) and value in (0, 1):
        return str(value)
    raise InvalidBitValueError(symbol, value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, str]:
    """Return a copy of ``context`` with every value coerced to a bit."""
    bits: dict[str, str] = {}
    for name, value in context.items():
        if not isinstance(name, str) or len(name) != 1:
            raise InvalidVariableNameError(name)
        bits[name] = to_bit(name, value)
    return bits


def evaluate(expr: Expr, context: Mapping[str, Any]) -> str:
    """Evaluate an expression against a variable assignment.

    Args:
        expr: Parsed expression AST.
        context: Variable name -> bit ("0"/"1"; bools and the ints 0/1 are accepted).

    Returns:
        "0" or "1".

    Raises:
        UndefinedVariableError: If a variable in ``expr`` is missing from ``context``.
        InvalidBitValueError: If a context value is not a bit.
        InvalidVariableNameError: If a context key is not a single character.
        EvaluationTooDeepError: If the tree is too deep to walk on the stack.
    """
    bits = normalize_context(context)
    try:
        result = expr.evaluate(bits)
    except RecursionError:
        raise EvaluationTooDeepError(TOO_DEEP_MESSAGE) from None
    logger.debug("%s -> %s", expr, result)
    return result


def evaluate_fragments(
    fragments: Iterable[BinaryExpr], context: Mapping[str, Any]
) -> list[tuple[str, str]]:
    """Evaluate each fragment, returning (expression string, bit) pairs in order."""
    bits = normalize_context(context)
    steps: list[tuple[str, str]] = []
    for fragment in fragments:
        try:
            steps.append((fragment.to_expression_string(), fragment.evaluate(bits)))
        except RecursionError:
            raise EvaluationTooDeepError(TOO_DEEP_MESSAGE) from None
    return steps
