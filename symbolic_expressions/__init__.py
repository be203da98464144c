"""Symbolic Expressions Package

Immutable symbolic expression trees for binding, simplification and
first-order differentiation, as the representation layer beneath a
gradient-descent style optimizer.
"""

from .expression_tree import (
  Expression, Literal, Variable, Addition, Multiplication,
  literal, variable, add, multiply,
  bind, simplify, differentiate, to_text,
  ExpressionSimplifier, ExpressionValidator, simplify_until_stable
)
from .expression_tree.utils import to_sympy, are_equivalent
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level

__version__ = "0.1.0"
__all__ = [
  "Expression", "Literal", "Variable", "Addition", "Multiplication",
  "literal", "variable", "add", "multiply",
  "bind", "simplify", "differentiate", "to_text",
  "ExpressionSimplifier", "ExpressionValidator", "simplify_until_stable",
  "to_sympy", "are_equivalent",
  "LogLevel", "configure_logging", "get_logger", "set_log_level"
]
