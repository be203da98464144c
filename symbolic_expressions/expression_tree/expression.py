"""Function-style API over the expression tree.

These mirror the methods on :class:`Expression` for callers that prefer
``simplify(expr)`` over ``expr.simplify()``.
"""

from .core.node import Expression, Literal, Variable, Addition, Multiplication


def literal(value: float) -> Expression:
  """Create a literal given its value."""
  return Literal(value)


def variable(name: str) -> Expression:
  """Create a variable given its name."""
  return Variable(name)


def add(left: Expression, right: Expression) -> Expression:
  return Addition(left, right)


def multiply(left: Expression, right: Expression) -> Expression:
  return Multiplication(left, right)


def bind(expr: Expression, variable_name: str, value: float) -> Expression:
  return expr.bind(variable_name, value)


def simplify(expr: Expression) -> Expression:
  """Single simplification pass; iterate for deeper results."""
  return expr.simplify()


def differentiate(expr: Expression, variable_name: str) -> Expression:
  return expr.differentiate(variable_name)


def to_text(expr: Expression) -> str:
  return expr.to_string()
