import sympy as sp
from ..core.node import Expression


def to_sympy(expr: Expression) -> sp.Expr:
  """Convert an expression tree into the equivalent SymPy expression"""
  return expr.to_sympy()


def are_equivalent(left: Expression, right: Expression) -> bool:
  """Algebraic equality, independent of tree shape"""
  difference = sp.simplify(to_sympy(left) - to_sympy(right))
  return difference == 0


def latex_representation(expr: Expression) -> str:
  return sp.latex(to_sympy(expr))
