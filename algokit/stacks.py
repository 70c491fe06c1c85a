"""Stack-based utilities: a minimum-tracking stack, bracket matching and RPN."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._minima: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Push ``val`` on top of the stack."""
        self._items.append(val)
        self._minima.append(min(self._minima[-1], val) if self._minima else val)

    def pop(self) -> None:
        """Drop the top element; does nothing on an empty stack."""
        if self._items:
            self._items.pop()
            self._minima.pop()

    def top(self) -> int:
        """Return the top element, or 0 when the stack is empty."""
        return self._items[-1] if self._items else 0

    def get_min(self) -> int:
        """Return the smallest element; raise IndexError when empty."""
        if not self._minima:
            raise IndexError("get_min from empty stack")
        return self._minima[-1]


_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order.

    Strings shorter than two characters and any other characters are invalid.
    """
    if len(s) < 2:
        return False
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif stack and _PAIRS.get(char) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer reverse Polish notation; division truncates toward zero.

    Raises ValueError for a malformed expression or token and
    ZeroDivisionError for division by zero.
    """
    stack: list[int] = []
    for token in tokens:
        op = _OPERATORS.get(token)
        if op is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} lacks operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(op(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]