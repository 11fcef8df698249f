import logging
from nconv.converters import (
    infix_to_postfix, infix_to_prefix, postfix_to_infix, prefix_to_postfix, postfix_to_prefix,
)

def test_missing_operand_renders_empty_segment(caplog):
    with caplog.at_level(logging.WARNING, logger="nconv.converters"):
        res = postfix_to_infix("A +")
    assert res.result == " + A"
    assert res.steps[-1].action == "finalize"
    assert "Missing operand" in caplog.text

def test_prefix_underflow_does_not_raise():
    assert prefix_to_postfix("+ A").result == "A  +"

def test_leftover_fragments_keep_top():
    assert postfix_to_infix("A B").result == "B"

def test_empty_fragment_input():
    res = postfix_to_prefix("")
    assert res.result == ""
    assert [(s.sequence_index, s.action) for s in res.steps] == [(1, "finalize")]

def test_unmatched_open_paren_is_flushed():
    assert infix_to_postfix("(A + B").result == "A B + ("

def test_unmatched_close_paren_is_tolerated(caplog):
    with caplog.at_level(logging.WARNING, logger="nconv.converters"):
        res = infix_to_postfix("A + B)")
    assert res.result == "A B +"
    assert "Unmatched ')'" in caplog.text

def test_parens_in_postfix_are_ignored_with_a_step():
    res = postfix_to_prefix("A B + )")
    assert res.result == "+ A B"
    assert res.steps[3].action == "ignore )"
    assert [s.sequence_index for s in res.steps] == [1, 2, 3, 4, 5]

def test_composite_path_survives_unbalanced_input():
    assert infix_to_prefix("(A + B").result == "+ A B"
