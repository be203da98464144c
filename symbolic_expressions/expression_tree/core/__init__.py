"""Core expression tree components."""

from .node import Expression, Literal, Variable, BinaryOpNode, Addition, Multiplication
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, BINARY_OPERATIONS,
    evaluate_binary_op, format_literal, is_real_number
)

__all__ = [
    'Expression', 'Literal', 'Variable', 'BinaryOpNode', 'Addition', 'Multiplication',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'BINARY_OPERATIONS',
    'evaluate_binary_op', 'format_literal', 'is_real_number'
]
