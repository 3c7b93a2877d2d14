"""
booltree - parse, evaluate, and tabulate boolean algebra expressions.

Expressions use ! (NOT), * (AND), + (OR), parentheses, the constants
0 and 1, and single-character variables.
"""

from __future__ import annotations

import logging

from ._version import get_version
from .core.errors import (
    BoolTreeError,
    EvaluationTooDeepError,
    ExpressionEvalError,
    ExpressionParseError,
    ExpressionSyntaxError,
    ExpressionTokenError,
    InvalidBitValueError,
    InvalidOperatorError,
    InvalidSymbolError,
    InvalidVariableNameError,
    MissingCloseParenError,
    NestingTooDeepError,
    TruthTableError,
    UndefinedVariableError,
    UnexpectedTokenError,
    UnexpectedTrailingInputError,
    UnknownSymbolError,
)
from .core.expression_lang import Parser, evaluate, evaluate_fragments, linearize, parse_expr
from .core.truth_table import TruthTable, collect_variables, enumerate_assignments

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = get_version()

__all__ = [
    "__version__",
    "BoolTreeError",
    "EvaluationTooDeepError",
    "ExpressionEvalError",
    "ExpressionParseError",
    "ExpressionSyntaxError",
    "ExpressionTokenError",
    "InvalidBitValueError",
    "InvalidOperatorError",
    "InvalidSymbolError",
    "InvalidVariableNameError",
    "MissingCloseParenError",
    "NestingTooDeepError",
    "Parser",
    "TruthTable",
    "TruthTableError",
    "UndefinedVariableError",
    "UnexpectedTokenError",
    "UnexpectedTrailingInputError",
    "UnknownSymbolError",
    "collect_variables",
    "enumerate_assignments",
    "evaluate",
    "evaluate_fragments",
    "linearize",
    "parse_expr",
]
