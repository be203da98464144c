import pytest

from symbolic_expressions import (
    Addition,
    Expression,
    Literal,
    Multiplication,
    Variable,
    add,
    literal,
    multiply,
    to_text,
    variable,
)
from symbolic_expressions.expression_tree import BinaryOpNode, NodeType


# ===== Construction =====
def test_literal_stores_value_as_float() -> None:
    node = literal(8)
    assert isinstance(node, Literal)
    assert isinstance(node.value, float)
    assert node.value == 8.0


def test_variable_keeps_name_verbatim() -> None:
    node = variable("learning rate")
    assert isinstance(node, Variable)
    assert node.name == "learning rate"


def test_add_and_multiply_build_nodes_without_simplifying() -> None:
    zero = literal(0)
    one = literal(1)
    total = add(zero, zero)
    product = multiply(one, zero)

    assert isinstance(total, Addition)
    assert total.left is zero and total.right is zero
    assert isinstance(product, Multiplication)
    assert to_text(total) == "(0.0 + 0.0)"
    assert to_text(product) == "(1.0 * 0.0)"


def test_operators_match_named_combinators() -> None:
    x = variable("x")
    assert literal(8) * x + literal(8) == add(multiply(literal(8), x), literal(8))


def test_operators_wrap_plain_numbers_as_literals() -> None:
    x = variable("x")
    assert str(x + 2) == "(x + 2.0)"
    assert str(2 * x) == "(2.0 * x)"
    assert str(0.5 + x * 3) == "(0.5 + (x * 3.0))"


def test_node_types() -> None:
    x = variable("x")
    assert literal(1).node_type == NodeType.LITERAL
    assert x.node_type == NodeType.VARIABLE
    assert (x + x).node_type == NodeType.ADDITION
    assert (x * x).node_type == NodeType.MULTIPLICATION


# ===== Type errors =====
@pytest.mark.parametrize("value", ["3", None, True, [1.0]])
def test_literal_rejects_non_real_values(value) -> None:
    with pytest.raises(TypeError):
        literal(value)


def test_variable_rejects_non_string_names() -> None:
    with pytest.raises(TypeError):
        variable(3)


def test_named_combinators_require_expressions() -> None:
    with pytest.raises(TypeError):
        add(variable("x"), 3)
    with pytest.raises(TypeError):
        multiply("x", variable("x"))


def test_operators_reject_unsupported_operands() -> None:
    with pytest.raises(TypeError):
        variable("x") + "y"
    with pytest.raises(TypeError):
        None * variable("x")


def test_base_classes_are_abstract() -> None:
    with pytest.raises(TypeError):
        Expression()
    with pytest.raises(TypeError):
        BinaryOpNode(variable("x"), variable("y"))


# ===== Rendering =====
@pytest.mark.parametrize(
    "value, expected",
    [
        (8, "8.0"),
        (40.0, "40.0"),
        (-3, "-3.0"),
        (0.5, "0.5"),
        (0.0, "0.0"),
        (-0.0, "-0.0"),
        (0.001, "0.001"),
        (1234567.0, "1234567.0"),
        (1e7, "1.0E7"),
        (12345678.9, "1.23456789E7"),
        (0.0001, "1.0E-4"),
        (-2.5e-5, "-2.5E-5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (float("nan"), "NaN"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
    ],
)
def test_literal_rendering(value, expected) -> None:
    assert to_text(literal(value)) == expected


def test_every_composite_is_parenthesized() -> None:
    x = variable("x")
    y = variable("y")
    expr = (x + y) * (literal(2) + x * y)
    assert str(expr) == "((x + y) * (2.0 + (x * y)))"


def test_left_nested_combinators_render_left_nested() -> None:
    x = variable("x")
    expr = (literal(4) * x * x) + (literal(8) * x) + literal(16)
    assert str(expr) == "((((4.0 * x) * x) + (8.0 * x)) + 16.0)"


def test_repr_shows_constructor_form() -> None:
    expr = literal(8) + variable("x")
    assert repr(expr) == "Addition(Literal(8.0), Variable('x'))"


# ===== Value semantics =====
def test_structural_equality() -> None:
    x = variable("x")
    y = variable("y")
    assert literal(1) == literal(1.0)
    assert variable("x") == x
    assert variable("x") != variable("X")
    assert x + y == variable("x") + variable("y")
    assert x + y != y + x
    assert x + y != x * y
    assert literal(1) != variable("1")


def test_equal_expressions_hash_equal() -> None:
    x = variable("x")
    nodes = {x * x, variable("x") * variable("x"), x + x, literal(2), literal(2.0)}
    assert len(nodes) == 3


def test_nodes_are_immutable() -> None:
    x = variable("x")
    node = literal(3)
    total = x + node
    with pytest.raises(AttributeError):
        node.value = 4.0
    with pytest.raises(AttributeError):
        x.name = "y"
    with pytest.raises(AttributeError):
        total.left = node
    with pytest.raises(AttributeError):
        total.extra = 1


def test_size_and_depth() -> None:
    x = variable("x")
    expr = (x * literal(2)) + x
    assert expr.size() == 5
    assert expr.depth() == 3
    assert x.size() == 1
    assert x.depth() == 1


# ===== Deep trees =====
def _polynomial(terms: int):
    x = variable("x")
    return sum(literal(i) * x for i in range(terms))


def test_deep_tree_renders_compares_and_hashes() -> None:
    terms = 5000
    expr = _polynomial(terms)
    same = _polynomial(terms)
    different = _polynomial(terms - 1) + literal(terms) * variable("x")

    rendered = str(expr)
    assert rendered.startswith("(" * terms + "0.0 + (0.0 * x))")
    assert rendered.endswith(" + (4999.0 * x))")
    assert rendered.count("(") == 2 * terms

    assert expr == same
    assert expr != different
    assert hash(expr) == hash(same)
    assert len({expr, same}) == 1

    assert expr.size() == 4 * terms + 1
    assert expr.depth() == terms + 2
