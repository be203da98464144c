import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from symbolic_expressions import literal, variable, simplify_until_stable, are_equivalent


def main():
  x = variable("x")

  # 8x + 8
  expr1 = literal(8) * x + literal(8)
  # 4x^2 + 8x + 16
  expr2 = (literal(4) * x * x) + (literal(8) * x) + literal(16)

  print(expr1)
  print(expr1.bind("x", 4))
  print(expr1.bind("x", 4).simplify())
  print(expr1.bind("x", 4).simplify().simplify())
  print(expr1.differentiate("x").simplify())

  derivative = expr2.differentiate("x")
  print(f"d/dx {expr2}")
  print(f"  raw:        {derivative}")
  print(f"  simplified: {simplify_until_stable(derivative)}")
  print(f"  equals 8x + 8: {are_equivalent(derivative, literal(8) * x + literal(8))}")

  # Gradient at x = 1.5, binding before simplifying
  slope = simplify_until_stable(derivative.bind("x", 1.5))
  print(f"  slope at x = 1.5: {slope}")


if __name__ == "__main__":
  main()
