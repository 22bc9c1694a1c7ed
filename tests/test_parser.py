import pytest

from ttgen.errors import (
    EmbeddedOrderMarkerError,
    MismatchedParenthesesError,
    NonVariableInOrderError,
    StackOverflowError,
    UnexpectedCharacterError,
    VariableCapacityError,
)
from ttgen.expression import Directive, Expression
from ttgen.parser import parse_line
from ttgen.registry import VariableRegistry


@pytest.mark.parametrize("line, postfix", [
    ("A AND B", "A B AND"),
    ("A OR B AND C", "A B OR C AND"),
    ("A OR (B AND C)", "A B C AND OR"),
    ("NOT A AND B", "A NOT B AND"),
    ("NOT (A AND B)", "A B AND NOT"),
    ("!!A", "A NOT NOT"),
    ("A -> B = C", "A B IMPLIES C EQUIV"),
    ("A XOR NOT B", "A B NOT XOR"),
    ("((A))", "A"),
])
def test_postfix(line, postfix):
    expr = parse_line(line)
    assert isinstance(expr, Expression)
    assert expr.postfix() == postfix


def test_names_and_text():
    expr = parse_line("  b OR a OR b \n")
    assert expr.names == ('b', 'a')
    assert expr.text == "b OR a OR b"


@pytest.mark.parametrize("line", ["(A AND B", "A AND B)", ")(", "((A)"])
def test_mismatched_parentheses(line):
    with pytest.raises(MismatchedParenthesesError):
        parse_line(line)


def test_unexpected_character():
    with pytest.raises(UnexpectedCharacterError) as info:
        parse_line("A $ B")
    assert info.value.char == '$'
    assert str(info.value) == "unexpected character '$'"


def test_order_directive():
    registry = VariableRegistry(['X'])
    result = parse_line("/ B A B", registry)
    assert isinstance(result, Directive)
    assert result.names == ('B', 'A')


def test_empty_order_directive():
    assert parse_line("/").names == ()


def test_embedded_order_marker():
    with pytest.raises(EmbeddedOrderMarkerError):
        parse_line("A / B")


@pytest.mark.parametrize("line, text", [("/ A AND B", "AND"), ("/ A (", "("), ("/ / A", "/")])
def test_non_variable_in_order_directive(line, text):
    with pytest.raises(NonVariableInOrderError) as info:
        parse_line(line)
    assert info.value.text == text


def test_unexpected_character_in_order_directive():
    with pytest.raises(UnexpectedCharacterError):
        parse_line("/ A $")


def test_side_stack_overflow():
    with pytest.raises(StackOverflowError):
        parse_line("(" * 129 + "A" + ")" * 129)
    assert parse_line("(" * 128 + "A" + ")" * 128).postfix() == "A"


def test_variable_capacity():
    line = " OR ".join(f"v{i}" for i in range(65))
    with pytest.raises(VariableCapacityError):
        parse_line(line)


def test_unexpected_control_character_is_escaped():
    with pytest.raises(UnexpectedCharacterError) as info:
        parse_line("A AND B\r\n")
    assert info.value.char == '\r'
    assert str(info.value) == "unexpected character '\\r'"
