"""
Character classification and scanning primitives.

The predicates are ASCII-only and case sensitive. The scanners take the
text and a start offset and return the offset just past the recognized run,
or None when the run is required and nothing matched.
"""

from __future__ import annotations

from typing import Callable


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_alpha_lower(ch: str) -> bool:
    """Is the character a lowercase letter?"""
    return "a" <= ch <= "z"


def is_alpha_upper(ch: str) -> bool:
    """Is the character an uppercase letter?"""
    return "A" <= ch <= "Z"


def is_alpha(ch: str) -> bool:
    return is_alpha_lower(ch) or is_alpha_upper(ch)


def is_alphanum_lower(ch: str) -> bool:
    """Is the character a lowercase letter or a digit?"""
    return is_alpha_lower(ch) or is_digit(ch)


def is_alphanum_upper(ch: str) -> bool:
    """Is the character an uppercase letter or a digit?"""
    return is_alpha_upper(ch) or is_digit(ch)


def is_alphanum(ch: str) -> bool:
    return is_alpha(ch) or is_digit(ch)


# ============================================================================
# Scanners
# ============================================================================

def scan0(text: str, pos: int, predicate: Callable[[str], bool]) -> int:
    """Consume zero or more characters satisfying predicate."""
    end = pos
    while end < len(text) and predicate(text[end]):
        end += 1
    return end


def scan1(text: str, pos: int, predicate: Callable[[str], bool]) -> int | None:
    """Consume one or more characters satisfying predicate."""
    end = scan0(text, pos, predicate)
    return end if end > pos else None


def scan_leading(
    text: str,
    pos: int,
    first: Callable[[str], bool],
    rest: Callable[[str], bool],
) -> int | None:
    """Consume one character satisfying first, then zero or more satisfying rest."""
    if pos >= len(text) or not first(text[pos]):
        return None
    return scan0(text, pos + 1, rest)


def alpha_alphanum(text: str, pos: int) -> int | None:
    """A letter followed by zero or more letters and digits."""
    return scan_leading(text, pos, is_alpha, is_alphanum)


def alpha_alphanum_upper(text: str, pos: int) -> int | None:
    """An uppercase letter followed by zero or more uppercase letters and digits."""
    return scan_leading(text, pos, is_alpha_upper, is_alphanum_upper)


def alpha_alphanum_lower(text: str, pos: int) -> int | None:
    """A lowercase letter followed by zero or more lowercase letters and digits."""
    return scan_leading(text, pos, is_alpha_lower, is_alphanum_lower)


def digits(text: str, pos: int) -> int | None:
    """One or more decimal digits."""
    return scan1(text, pos, is_digit)
