import numbers
import operator
from enum import IntEnum
from typing import Callable, Dict

import numpy as np


class NodeType(IntEnum):
  LITERAL = 0
  VARIABLE = 1
  ADDITION = 2
  MULTIPLICATION = 3


class OpType(IntEnum):
  ADD = 0
  MUL = 1


# Mapping dictionaries
BINARY_OP_MAP: Dict[str, OpType] = {'+': OpType.ADD, '*': OpType.MUL}

BINARY_OPERATIONS: Dict[OpType, Callable[[float, float], float]] = {
  OpType.ADD: operator.add,
  OpType.MUL: operator.mul,
}

# JVM Double.toString switches to scientific notation outside this range
_POSITIONAL_MIN = 1e-3
_POSITIONAL_MAX = 1e7


def is_real_number(value) -> bool:
  """True for ints, floats and numpy real scalars, but not bools"""
  return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def evaluate_binary_op(left_val: float, right_val: float, op: str) -> float:
  """Fold two literal values with IEEE double arithmetic"""
  return float(BINARY_OPERATIONS[BINARY_OP_MAP[op]](left_val, right_val))


def format_literal(value: float) -> str:
  """Render a double the way the canonical text form expects it.

  Integral values keep a trailing ``.0``, magnitudes in [1e-3, 1e7) are
  positional and everything else uses an ``E`` exponent, e.g. ``1.0E7``.
  Digits are always the shortest representation that round-trips.
  """
  if np.isnan(value):
    return "NaN"
  if np.isinf(value):
    return "Infinity" if value > 0 else "-Infinity"

  magnitude = abs(value)
  if magnitude == 0.0 or _POSITIONAL_MIN <= magnitude < _POSITIONAL_MAX:
    return np.format_float_positional(value, unique=True, trim='0')

  text = np.format_float_scientific(value, unique=True, trim='0', exp_digits=1)
  return text.replace('e+', 'E').replace('e', 'E')
