"""Expression Tree Module

Immutable expression trees with binding, simplification and differentiation.
"""

from .core.node import (
    Expression,
    Literal,
    Variable,
    BinaryOpNode,
    Addition,
    Multiplication
)
from .core.operators import NodeType, OpType, BINARY_OP_MAP, format_literal
from .expression import (
    literal, variable, add, multiply,
    bind, simplify, differentiate, to_text
)
from .utils import ExpressionSimplifier, ExpressionValidator, simplify_until_stable

__all__ = [
    "Expression", "Literal", "Variable", "BinaryOpNode", "Addition", "Multiplication",
    "NodeType", "OpType", "BINARY_OP_MAP", "format_literal",
    "literal", "variable", "add", "multiply",
    "bind", "simplify", "differentiate", "to_text",
    "ExpressionSimplifier", "ExpressionValidator", "simplify_until_stable"
]
