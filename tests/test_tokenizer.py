import pytest
from nconv.tokenizer import (
    tokenize, classify, precedence, is_right_associative, InvalidCharacterError, ConversionError,
)
from nconv.types import TokenKind

def test_multi_digit_numbers_merge():
    assert tokenize("12 + 3") == ["12", "+", "3"]

def test_letters_do_not_merge():
    assert tokenize("AB") == ["A", "B"]

def test_whitespace_and_all_symbols():
    assert tokenize("  (a+B1)*c/d^ 45 -x ") == ["(", "a", "+", "B", "1", ")", "*", "c", "/", "d", "^", "45", "-", "x"]

def test_empty_input_is_empty_list():
    assert tokenize("") == []
    assert tokenize("   ") == []

def test_invalid_character_identifies_char():
    with pytest.raises(InvalidCharacterError) as ei:
        tokenize("A + # B")
    assert ei.value.char == "#"
    assert ei.value.position == 4
    assert str(ei.value) == "Invalid character: #"
    assert isinstance(ei.value, ConversionError)

def test_decimal_point_is_rejected():
    with pytest.raises(InvalidCharacterError) as ei:
        tokenize("1.5 + 2")
    assert ei.value.char == "."

def test_classify_and_rules():
    assert classify("12") is TokenKind.OPERAND
    assert classify("^") is TokenKind.OPERATOR
    assert classify("(") is TokenKind.LPAREN
    assert classify(")") is TokenKind.RPAREN
    assert precedence("^") == 4 and precedence("*") == precedence("/") == 3
    assert precedence("+") == precedence("-") == 2
    assert precedence("%") == 0
    assert is_right_associative("^") and not is_right_associative("-")
