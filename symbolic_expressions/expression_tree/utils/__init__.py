"""Utilities for expression trees."""

from .simplifier import ExpressionSimplifier, simplify_until_stable
from .sympy_utils import to_sympy, are_equivalent, latex_representation
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, count_nodes,
    find_nodes_by_type, get_variables, get_constants,
    get_variable_usage_counts
)
from .validator import ExpressionValidator

__all__ = [
    'ExpressionSimplifier', 'simplify_until_stable',
    'to_sympy', 'are_equivalent', 'latex_representation',
    'get_all_nodes', 'calculate_tree_depth', 'count_nodes',
    'find_nodes_by_type', 'get_variables', 'get_constants',
    'get_variable_usage_counts',
    'ExpressionValidator'
]
