from typing import Optional
from ..core.node import Expression
from ...logging_system import log_debug, log_warning


class ExpressionSimplifier:
  """Repeats single-pass simplification until the rendering stops changing.

  ``Expression.simplify`` is deliberately one bottom-up pass. This driver is
  the caller-side loop for anyone who wants the stable form instead of an
  intermediate one.
  """

  def __init__(self, max_passes: int = 100):
    if isinstance(max_passes, bool) or not isinstance(max_passes, int) or max_passes < 1:
      raise ValueError(f"max_passes must be a positive integer, got {max_passes!r}")
    self.max_passes = max_passes
    self.passes_used: Optional[int] = None

  def simplify_until_stable(self, expr: Expression) -> Expression:
    current = expr
    rendered = current.to_string()

    for pass_number in range(1, self.max_passes + 1):
      simplified = current.simplify()
      simplified_rendered = simplified.to_string()
      log_debug(f"simplify pass {pass_number}: {simplified_rendered}")

      if simplified_rendered == rendered:
        self.passes_used = pass_number
        return simplified

      current, rendered = simplified, simplified_rendered

    self.passes_used = self.max_passes
    log_warning(f"Expression not stable after {self.max_passes} simplification passes: {rendered}")
    return current


def simplify_until_stable(expr: Expression, max_passes: int = 100) -> Expression:
  return ExpressionSimplifier(max_passes=max_passes).simplify_until_stable(expr)
