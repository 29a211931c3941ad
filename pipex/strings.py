"""String helpers with the exact edge-case behaviour the command runner relies on."""

from __future__ import annotations

from itertools import zip_longest

INT_MAX = 2147483647
INT_MIN = -2147483648

_WHITESPACE = "\t\n\v\f\r "


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [field for field in s.split(sep) if field]


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one sign is accepted. Parsing stops at
    the first non-digit. A value above INT_MAX gives -1 and one below
    INT_MIN gives 0.
    """
    text = s.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] == "-" and text[1:2].isdigit():
        sign = -1
    if text[:1] in ("+", "-"):
        text = text[1:]

    result = 0
    for ch in text:
        if not ("0" <= ch <= "9"):
            break
        result = result * 10 + (ord(ch) - ord("0"))
        if result * sign > INT_MAX:
            return -1
        if result * sign < INT_MIN:
            return 0
    return result * sign


def itoa(n: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end of the string yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the rest of ``haystack`` from the match onwards, or ``None`` when
    there is no match. An empty needle matches at the start.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return haystack
    index = haystack.find(needle, 0, length)
    if index < 0:
        return None
    return haystack[index:]


def strcmp(a: str | None, b: str) -> int:
    """Compare two strings, returning the difference of the first mismatch.

    A missing first string compares as greater (1).
    """
    if a is None:
        return 1
    for ca, cb in zip_longest(a, b, fillvalue="\0"):
        if ca != cb:
            return ord(ca) - ord(cb)
    return 0