import pytest

from dsakit.stacks import min_add_to_make_valid, min_swaps, parse_bool_expr


@pytest.mark.parametrize(
    "expression, expected",
    [("!(&(t,f,t))", True), ("|(f,t)", True), ("&(t,t,f)", False)],
)
def test_parse_bool_expr_examples(expression, expected):
    assert parse_bool_expr(expression) is expected


def test_parse_bool_expr_literals():
    assert parse_bool_expr("t") is True
    assert parse_bool_expr("f") is False


@pytest.mark.parametrize("inner", ["t", "f", "&(t,t)", "|(f,f)", "|(&(t,f),t)"])
def test_parse_bool_expr_not_negates(inner):
    assert parse_bool_expr(f"!({inner})") is (not parse_bool_expr(inner))


@pytest.mark.parametrize("expression", ["", ")", "t)"])
def test_parse_bool_expr_malformed_raises(expression):
    with pytest.raises(ValueError):
        parse_bool_expr(expression)


@pytest.mark.parametrize(
    "s, expected",
    [("[]][][", 1), ("[][]", 0), ("]]][[[", 2), ("[][][]", 0)],
)
def test_min_swaps_examples(s, expected):
    assert min_swaps(s) == expected


def test_min_swaps_nested_balanced_is_zero():
    assert min_swaps("[[[]]][]") == 0


@pytest.mark.parametrize(
    "s, expected",
    [("())", 1), ("(((", 3), ("()", 0), ("(()())", 0), ("((())", 1)],
)
def test_min_add_to_make_valid_examples(s, expected):
    assert min_add_to_make_valid(s) == expected


def test_min_add_to_make_valid_concatenation_is_additive_for_closers_then_openers():
    left, right = ")))", "(("
    assert min_add_to_make_valid(left + right) == min_add_to_make_valid(left) + min_add_to_make_valid(right)