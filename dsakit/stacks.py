"""Stack-based parsing of boolean expressions and bracket balancing."""

from __future__ import annotations

_OPERATORS = frozenset("!&|")
_OPERANDS = frozenset("tf")


def _apply(operator: str, values: set[str]) -> str:
    if operator == "!":
        return "f" if "t" in values else "t"
    if operator == "&":
        return "f" if "f" in values else "t"
    return "t" if "t" in values else "f"


def parse_bool_expr(expression: str) -> bool:
    """Evaluate an expression built from t, f, !(...), &(...) and |(...)."""
    stack: list[str] = []
    for ch in expression:
        if ch in _OPERATORS or ch in _OPERANDS:
            stack.append(ch)
        elif ch == ")":
            values: set[str] = set()
            while stack and stack[-1] not in _OPERATORS:
                values.add(stack.pop())
            if not stack:
                raise ValueError(f"unbalanced expression: {expression!r}")
            stack.append(_apply(stack.pop(), values))
    if not stack:
        raise ValueError(f"empty expression: {expression!r}")
    return stack[-1] == "t"


def min_swaps(s: str) -> int:
    """Return the fewest swaps that balance a string of square brackets."""
    unmatched = 0
    for ch in s:
        if ch == "[":
            unmatched += 1
        elif unmatched:
            unmatched -= 1
    return (unmatched + 1) // 2


def min_add_to_make_valid(s: str) -> int:
    """Return how many parentheses must be added to make s balanced."""
    open_count = 0
    unmatched_close = 0
    for ch in s:
        if ch == "(":
            open_count += 1
        elif ch == ")":
            if open_count:
                open_count -= 1
            else:
                unmatched_close += 1
    return open_count + unmatched_close