"""Bracket matching with a stack."""

from __future__ import annotations

from dstextbook.stacks import LinkedStack

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def test_pair(expression: str) -> bool:
    """Return True when every bracket in ``expression`` is closed in the right order."""
    stack = LinkedStack()
    for symbol in expression:
        if symbol in _OPENERS:
            stack.push(symbol)
        elif symbol in _PAIRS:
            if stack.is_empty() or stack.pop() != _PAIRS[symbol]:
                return False
    return stack.is_empty()