"""Evaluation of single-digit postfix expressions."""

from __future__ import annotations

from dstextbook.stacks import LinkedStack, StackEmptyError

_OPERATORS = frozenset("+-*/")


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def eval_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single digits and ``+ - * /``.

    Division truncates toward zero. The value on top of the stack at the end
    is the result.
    """
    stack = LinkedStack()
    for symbol in expression:
        if symbol not in _OPERATORS:
            if not ("0" <= symbol <= "9"):
                raise ValueError(f"unexpected symbol {symbol!r}")
            stack.push(ord(symbol) - ord("0"))
            continue
        try:
            right = stack.pop()
            left = stack.pop()
        except StackEmptyError:
            raise ValueError(f"operator {symbol!r} lacks operands") from None
        if symbol == "+":
            stack.push(left + right)
        elif symbol == "-":
            stack.push(left - right)
        elif symbol == "*":
            stack.push(left * right)
        else:
            if right == 0:
                raise ZeroDivisionError("division by zero")
            stack.push(_truncating_div(left, right))
    try:
        return stack.pop()
    except StackEmptyError:
        raise ValueError("empty expression") from None