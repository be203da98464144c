import numpy as np
from typing import List
from ..core.node import Expression, Literal
from .tree_utils import get_all_nodes
from ...logging_system import log_debug


class ExpressionValidator:
  """Checks results for non-finite literals.

  NaN and infinities are legal literal values and propagate through
  simplification under IEEE rules; callers that want to reject them use this.
  """

  @staticmethod
  def invalid_literals(node: Expression) -> List[Literal]:
    return [n for n in get_all_nodes(node, 'depth_first')
            if isinstance(n, Literal) and not np.isfinite(n.value)]

  @staticmethod
  def is_valid_expression(node: Expression) -> bool:
    invalid = ExpressionValidator.invalid_literals(node)
    if invalid:
      log_debug(f"{len(invalid)} non-finite literal(s) in {node.to_string()}")
      return False
    return True
