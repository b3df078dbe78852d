"""Bracket balance checks."""

from __future__ import annotations

__all__ = ["parenthesis_match", "multi_parenthesis_match"]

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())


def parenthesis_match(expression: str) -> bool:
    """Report whether the round brackets in expression are balanced."""
    depth = 0
    for char in expression:
        if char == "(":
            depth += 1
        elif char == ")":
            if depth == 0:
                return False
            depth -= 1
    return depth == 0


def multi_parenthesis_match(expression: str) -> bool:
    """Report whether (), {} and [] in expression are balanced and properly nested."""
    stack: list[str] = []
    for char in expression:
        if char in _OPENERS:
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack