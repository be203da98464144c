import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple
from .operators import NodeType, evaluate_binary_op, format_literal, is_real_number


class Expression(ABC):
  """Immutable symbolic expression tree.

  Exactly four concrete variants exist: Literal, Variable, Addition and
  Multiplication. Every transformation returns a new tree; untouched
  subtrees are shared since no node is ever mutated.
  """

  __slots__ = ('_hash_cache', '_size_cache', '_depth_cache', '_string_cache')

  node_type: NodeType

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None
    self._depth_cache: Optional[int] = None
    self._string_cache: Optional[str] = None

  def __add__(self, other):
    other = _coerce_operand(other)
    if other is None:
      return NotImplemented
    return Addition(self, other)

  def __radd__(self, other):
    other = _coerce_operand(other)
    if other is None:
      return NotImplemented
    return Addition(other, self)

  def __mul__(self, other):
    other = _coerce_operand(other)
    if other is None:
      return NotImplemented
    return Multiplication(self, other)

  def __rmul__(self, other):
    other = _coerce_operand(other)
    if other is None:
      return NotImplemented
    return Multiplication(other, self)

  @abstractmethod
  def bind(self, variable_name: str, value: float) -> 'Expression':
    """Substitute ``value`` for every occurrence of ``variable_name``"""
    pass

  @abstractmethod
  def simplify(self) -> 'Expression':
    """One bottom-up pass of constant folding and 0/1 elimination"""
    pass

  @abstractmethod
  def differentiate(self, variable_name: str) -> 'Expression':
    """First derivative with respect to ``variable_name``, unsimplified"""
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def _render(self) -> str:
    pass

  @abstractmethod
  def _fields(self) -> Tuple:
    pass

  @abstractmethod
  def _compute_size(self) -> int:
    pass

  @abstractmethod
  def _compute_depth(self) -> int:
    pass

  def to_string(self) -> str:
    """Fully parenthesized infix rendering"""
    if self._string_cache is None:
      _fill_cache(self, '_string_cache', lambda node: node._render())
    return self._string_cache

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      _fill_cache(self, '_size_cache', lambda node: node._compute_size())
    return self._size_cache

  def depth(self) -> int:
    if self._depth_cache is None:
      _fill_cache(self, '_depth_cache', lambda node: node._compute_depth())
    return self._depth_cache

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    args = ", ".join(repr(field) for field in self._fields())
    return f"{type(self).__name__}({args})"

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return NotImplemented

    pending = [(self, other)]
    while pending:
      left, right = pending.pop()
      if left is right:
        continue
      if type(left) is not type(right):
        return False
      if isinstance(left, BinaryOpNode):
        if (left._hash_cache is not None and right._hash_cache is not None
            and left._hash_cache != right._hash_cache):
          return False
        pending.append((left._right, right._right))
        pending.append((left._left, right._left))
      elif left._fields() != right._fields():
        return False
    return True

  def __hash__(self) -> int:
    if self._hash_cache is None:
      _fill_cache(self, '_hash_cache', lambda node: hash((node.node_type, node._fields())))
    return self._hash_cache


class Literal(Expression):
  __slots__ = ('_value',)

  node_type = NodeType.LITERAL

  def __init__(self, value: float):
    if not is_real_number(value):
      raise TypeError(f"Literal value must be a real number, got {type(value).__name__}")
    super().__init__()
    self._value = float(value)

  @property
  def value(self) -> float:
    return self._value

  def bind(self, variable_name, value):
    return self

  def simplify(self):
    return self

  def differentiate(self, variable_name):
    return Literal(0.0)

  def to_sympy(self):
    if np.isnan(self._value):
      return sp.nan
    if np.isinf(self._value):
      return sp.oo if self._value > 0 else -sp.oo
    if self._value.is_integer():
      return sp.Integer(int(self._value))
    return sp.Float(self._value)

  def _render(self):
    return format_literal(self._value)

  def _fields(self):
    return (self._value,)

  def _compute_size(self):
    return 1

  def _compute_depth(self):
    return 1


class Variable(Expression):
  __slots__ = ('_name',)

  node_type = NodeType.VARIABLE

  def __init__(self, name: str):
    if not isinstance(name, str):
      raise TypeError(f"Variable name must be a str, got {type(name).__name__}")
    super().__init__()
    self._name = name

  @property
  def name(self) -> str:
    return self._name

  def bind(self, variable_name, value):
    if self._name == variable_name:
      return Literal(value)
    return self

  def simplify(self):
    return self

  def differentiate(self, variable_name):
    # Partial derivative: other variables are independent of this one
    if self._name == variable_name:
      return Literal(1.0)
    return Literal(0.0)

  def to_sympy(self):
    return sp.Symbol(self._name)

  def _render(self):
    return self._name

  def _fields(self):
    return (self._name,)

  def _compute_size(self):
    return 1

  def _compute_depth(self):
    return 1


class BinaryOpNode(Expression):
  """Shared storage and rendering for Addition and Multiplication"""

  __slots__ = ('_left', '_right')

  operator: str

  def __init__(self, left: Expression, right: Expression):
    if not isinstance(left, Expression) or not isinstance(right, Expression):
      raise TypeError(
        f"{type(self).__name__} operands must be expressions, "
        f"got {type(left).__name__} and {type(right).__name__}")
    super().__init__()
    self._left = left
    self._right = right

  @property
  def left(self) -> Expression:
    return self._left

  @property
  def right(self) -> Expression:
    return self._right

  def bind(self, variable_name, value):
    return type(self)(self._left.bind(variable_name, value),
                      self._right.bind(variable_name, value))

  def _render(self):
    return f"({self._left.to_string()} {self.operator} {self._right.to_string()})"

  def _fields(self):
    return (self._left, self._right)

  def _compute_size(self):
    return 1 + self._left.size() + self._right.size()

  def _compute_depth(self):
    return 1 + max(self._left.depth(), self._right.depth())


class Addition(BinaryOpNode):
  __slots__ = ()

  node_type = NodeType.ADDITION
  operator = '+'

  def simplify(self):
    left = self._left.simplify()
    right = self._right.simplify()

    if isinstance(left, Literal) and isinstance(right, Literal):
      return Literal(evaluate_binary_op(left.value, right.value, self.operator))
    if _is_literal_of(left, 0.0):
      return right  # 0 + x = x
    if _is_literal_of(right, 0.0):
      return left  # x + 0 = x
    return Addition(left, right)

  def differentiate(self, variable_name):
    return Addition(self._left.differentiate(variable_name),
                    self._right.differentiate(variable_name))

  def to_sympy(self):
    return sp.Add(self._left.to_sympy(), self._right.to_sympy())


class Multiplication(BinaryOpNode):
  __slots__ = ()

  node_type = NodeType.MULTIPLICATION
  operator = '*'

  def simplify(self):
    left = self._left.simplify()
    right = self._right.simplify()

    if isinstance(left, Literal) and isinstance(right, Literal):
      return Literal(evaluate_binary_op(left.value, right.value, self.operator))
    if _is_literal_of(left, 0.0) or _is_literal_of(right, 0.0):
      return Literal(0.0)  # absorbing element, checked before the identity
    if _is_literal_of(left, 1.0):
      return right  # 1 * x = x
    if _is_literal_of(right, 1.0):
      return left  # x * 1 = x
    return Multiplication(left, right)

  def differentiate(self, variable_name):
    # Product rule over the original, unsimplified operands
    return Addition(
      Multiplication(self._left.differentiate(variable_name), self._right),
      Multiplication(self._left, self._right.differentiate(variable_name)))

  def to_sympy(self):
    return sp.Mul(self._left.to_sympy(), self._right.to_sympy())


def _fill_cache(root: Expression, attribute: str, compute: Callable[[Expression], object]):
  """Post-order fill of a per-node cache, left before right.

  Children are always cached before their parent is computed, so ``compute``
  only ever reads cached child values and the walk needs no recursion.
  """
  stack = [(root, False)]
  while stack:
    node, children_done = stack.pop()
    if getattr(node, attribute) is not None:
      continue
    if children_done or not isinstance(node, BinaryOpNode):
      setattr(node, attribute, compute(node))
      continue
    stack.append((node, True))
    stack.append((node._right, False))
    stack.append((node._left, False))


def _is_literal_of(node: Expression, value: float) -> bool:
  # Numeric comparison, so -0.0 counts as zero
  return isinstance(node, Literal) and node.value == value


def _coerce_operand(other) -> Optional[Expression]:
  if isinstance(other, Expression):
    return other
  if is_real_number(other):
    return Literal(other)
  return None
