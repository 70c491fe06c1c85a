import pytest

from algokit.stacks import MinStack, eval_rpn, is_valid_parentheses


def test_min_tracks_smallest_pushed():
    stack = MinStack()
    pushed = []
    for value in [5, 7, 3, 8, 3, 1, 9]:
        stack.push(value)
        pushed.append(value)
        assert stack.get_min() == min(pushed)
        assert stack.top() == value


def test_pop_restores_previous_minimum():
    stack = MinStack()
    values = [-2, 0, -3]
    for value in values:
        stack.push(value)
    stack.pop()
    assert stack.top() == values[1]
    assert stack.get_min() == values[0]
    assert len(stack) == len(values) - 1


def test_pop_on_empty_is_harmless():
    stack = MinStack()
    stack.pop()
    assert not stack
    stack.push(4)
    assert stack.top() == 4


def test_top_of_empty_is_zero():
    assert MinStack().top() == 0


def test_get_min_of_empty_raises():
    with pytest.raises(IndexError):
        MinStack().get_min()


@pytest.mark.parametrize("text", ["()", "()[]{}", "{[()]}", "([]{})"])
def test_valid_brackets(text):
    assert is_valid_parentheses(text)


@pytest.mark.parametrize("text", ["(]", "([)]", "((", "){", "", "(", "(*", "{|", "[\\"])
def test_invalid_brackets(text):
    assert not is_valid_parentheses(text)


def test_rpn_examples():
    assert eval_rpn(["2", "1", "+", "3", "*"]) == 9
    assert eval_rpn(["4", "13", "5", "/", "+"]) == 6


def test_rpn_division_truncates_toward_zero():
    assert eval_rpn(["-7", "2", "/"]) == -3


def test_rpn_single_number():
    assert eval_rpn(["42"]) == 42


def test_rpn_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        eval_rpn(["1", "0", "/"])


@pytest.mark.parametrize("tokens", [[], ["+"], ["1", "+"], ["x"]])
def test_rpn_malformed(tokens):
    with pytest.raises(ValueError):
        eval_rpn(tokens)