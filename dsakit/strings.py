"""String problems: character counting, palindromes, parsing and comparisons."""

from __future__ import annotations

import re
from collections import Counter
from fractions import Fraction
from typing import Iterable, Sequence

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
_MINUTES_PER_DAY = 1440
_SENIOR_AGE = 60
_AGE_SLICE = slice(11, 13)

_FRACTION_TERM = re.compile(r"([+-]?\d+)/(\d+)")
_FRACTION_EXPR = re.compile(r"(?:[+-]?\d+/\d+)*")
_ATOI_PREFIX = re.compile(r" *([+-]?)([0-9]*)")


def common_chars(words: Sequence[str]) -> list[str]:
    """Return the characters present in every word, repeated as often as in all of them."""
    if not words:
        return []
    common = Counter(words[0])
    for word in words[1:]:
        common &= Counter(word)
    return sorted(common.elements())


def count_consistent_strings(allowed: str, words: Iterable[str]) -> int:
    """Count the words made only of characters from allowed."""
    permitted = set(allowed)
    return sum(1 for word in words if set(word) <= permitted)


def _digit_sum(value: int) -> int:
    return sum(int(digit) for digit in str(value))


def get_lucky(s: str, k: int) -> int:
    """Spell each letter as its alphabet position, then sum the digits k times."""
    if any(not ("a" <= ch <= "z") for ch in s):
        raise ValueError("only lowercase letters a-z can be converted")
    digits = "".join(str(ord(ch) - ord("a") + 1) for ch in s)
    total = sum(int(digit) for digit in digits)
    for _ in range(k - 1):
        total = _digit_sum(total)
    return total


def shortest_palindrome(s: str) -> str:
    """Return the shortest palindrome made by adding characters in front of s."""
    for end in range(len(s), 0, -1):
        prefix = s[:end]
        if prefix == prefix[::-1]:
            return s[end:][::-1] + s
    return s


def count_seniors(details: Iterable[str]) -> int:
    """Count passengers older than 60; the age sits at characters 11 and 12."""
    count = 0
    for info in details:
        age_text = info[_AGE_SLICE]
        if len(age_text) != 2 or not age_text.isdigit():
            raise ValueError(f"no age found in {info!r}")
        if int(age_text) > _SENIOR_AGE:
            count += 1
    return count


def min_length(s: str) -> int:
    """Return the length left after repeatedly removing "AB" and "CD"."""
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] + ch in ("AB", "CD"):
            stack.pop()
        else:
            stack.append(ch)
    return len(stack)


def longest_palindrome_length(s: str) -> int:
    """Return the length of the longest palindrome buildable from the letters of s."""
    length = 0
    has_odd = False
    for count in Counter(s).values():
        length += count - count % 2
        has_odd = has_odd or count % 2 == 1
    return length + 1 if has_odd else length


def _to_minutes(time_point: str) -> int:
    return int(time_point[:2]) * 60 + int(time_point[3:5])


def find_min_difference(time_points: Iterable[str]) -> int:
    """Return the smallest difference in minutes between any two "HH:MM" times."""
    minutes = sorted(_to_minutes(point) for point in time_points)
    if not minutes:
        raise ValueError("at least one time point is required")
    gaps = (later - earlier for earlier, later in zip(minutes, minutes[1:]))
    wrap_around = _MINUTES_PER_DAY - minutes[-1] + minutes[0]
    return min(gaps, default=wrap_around) if len(minutes) > 1 and min(
        later - earlier for earlier, later in zip(minutes, minutes[1:])
    ) < wrap_around else wrap_around


def fraction_addition(expression: str) -> str:
    """Evaluate a sum of fractions such as "-1/2+1/3" and return it in lowest terms."""
    if _FRACTION_EXPR.fullmatch(expression) is None:
        raise ValueError(f"malformed fraction expression: {expression!r}")
    total = sum(
        (Fraction(int(num), int(den)) for num, den in _FRACTION_TERM.findall(expression)),
        Fraction(0),
    )
    return f"{total.numerator}/{total.denominator}"


def uncommon_from_sentences(s1: str, s2: str) -> list[str]:
    """Return, sorted, the words occurring exactly once across both sentences."""
    counts = Counter(s1.split()) + Counter(s2.split())
    return sorted(word for word, count in counts.items() if count == 1)


def my_atoi(s: str) -> int:
    """Parse a leading signed integer after spaces, clamped to the 32-bit range."""
    match = _ATOI_PREFIX.match(s)
    assert match is not None
    sign_text, digits = match.groups()
    if not digits:
        return 0
    value = -int(digits) if sign_text == "-" else int(digits)
    return max(INT_MIN, min(INT_MAX, value))