"""
Tree Utility Functions

Traversal and inspection helpers for expression trees. All of them are
read-only; nothing here builds or rewrites a tree.
"""

from collections import Counter, deque
from typing import List, Set

from ..core.node import Expression, BinaryOpNode, Literal, Variable
from ..core.operators import NodeType


def get_all_nodes(node: Expression, traversal_order: str = 'breadth_first') -> List[Expression]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Expression) -> List[Expression]:
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)

        if isinstance(current_node, BinaryOpNode):
            nodes_to_visit.append(current_node.left)
            nodes_to_visit.append(current_node.right)

    return all_nodes


def _depth_first_traversal(node: Expression) -> List[Expression]:
    """Pre-order, left before right"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)

        if isinstance(current_node, BinaryOpNode):
            stack.append(current_node.right)
            stack.append(current_node.left)

    return all_nodes


def calculate_tree_depth(node: Expression) -> int:
    return node.depth()


def count_nodes(node: Expression) -> int:
    return node.size()


def find_nodes_by_type(node: Expression, node_type: NodeType) -> List[Expression]:
    return [n for n in get_all_nodes(node, 'depth_first') if n.node_type == node_type]


def get_variables(node: Expression) -> Set[str]:
    """Names of all free variables in the tree"""
    return {n.name for n in get_all_nodes(node) if isinstance(n, Variable)}


def get_constants(node: Expression) -> List[float]:
    """Literal values in depth-first, left-to-right order"""
    return [n.value for n in get_all_nodes(node, 'depth_first') if isinstance(n, Literal)]


def get_variable_usage_counts(node: Expression) -> Counter:
    return Counter(n.name for n in get_all_nodes(node) if isinstance(n, Variable))
