import pytest

from drillkit.lessons.errors import (
    CreationError,
    NegativeValueError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    ZeroValueError,
    generate_nametag_text,
    parse_pos_nonzero,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError, match="`name` was empty; it must be nonempty."):
        generate_nametag_text("")


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ValueError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


def test_item_quantity_empty():
    with pytest.raises(ValueError) as info:
        total_cost("")
    assert str(info.value) == "cannot parse integer from empty string"


def test_item_quantity_out_of_range():
    with pytest.raises(ValueError) as info:
        total_cost("2147483648")
    assert str(info.value) == "number too large to fit in target type"


def test_item_quantity_with_plus_sign():
    assert total_cost("+8") == 41


def test_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(NegativeValueError):
        PositiveNonzeroInteger(-10)
    with pytest.raises(ZeroValueError):
        PositiveNonzeroInteger(0)


def test_creation_error_messages():
    with pytest.raises(CreationError, match="number is negative"):
        PositiveNonzeroInteger(-1)
    with pytest.raises(CreationError, match="number is zero"):
        PositiveNonzeroInteger(0)


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert not isinstance(info.value.cause, CreationError)
    assert str(info.value) == "invalid digit found in string"


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert isinstance(info.value.cause, NegativeValueError)


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert isinstance(info.value.cause, ZeroValueError)


def test_positive():
    x = PositiveNonzeroInteger(42)
    assert parse_pos_nonzero("42") == x