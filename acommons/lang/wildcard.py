"""Wildcard matching with ``*`` and ``?``.

Patterns are parsed into tokens once and cached:

- ``*`` matches any run of characters, including none (``/`` and ``.`` too)
- ``?`` matches exactly one character
- ``\\`` escapes the next character
- every other character matches itself

Matching is case-insensitive unless requested otherwise. It backtracks
only to the most recent ``*``, so a pattern of length m against a text of
length n costs at most O(n * m) however many stars the pattern holds.

Example:
    >>> Wildcard("*.example.com").matches("ads.Example.com")
    True
    >>> wildcard_match("file-??.txt", "file-01.txt")
    True
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from typing import TypeAlias

from acommons.core.exceptions import WildcardPatternException

ESCAPE = "\\"


class _Token:
    __slots__ = ("symbol",)

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol

    def __repr__(self) -> str:
        return self.symbol


ANY_RUN = _Token("*")
ANY_ONE = _Token("?")

Token: TypeAlias = "str | _Token"


def _fold(text: str, case_sensitive: bool) -> Sequence[str]:
    if case_sensitive:
        return text
    # Per character, so '?' still consumes exactly one input character
    return [char.lower() for char in text]


@lru_cache(maxsize=512)
def _compile(pattern: str, case_sensitive: bool) -> tuple[Token, ...]:
    tokens: list[Token] = []
    chars = iter(pattern)
    for char in chars:
        if char == ESCAPE:
            following = next(chars, None)
            if following is None:
                raise WildcardPatternException(
                    detail=f"Pattern ends with a lone escape character: {pattern!r}",
                    extra={"pattern": pattern},
                )
            tokens.append(following if case_sensitive else following.lower())
        elif char == "*":
            if not tokens or tokens[-1] is not ANY_RUN:
                tokens.append(ANY_RUN)
        elif char == "?":
            tokens.append(ANY_ONE)
        else:
            tokens.append(char if case_sensitive else char.lower())
    return tuple(tokens)


def _match(tokens: Sequence[Token], text: Sequence[str]) -> bool:
    p = t = 0
    star = -1
    resume = 0
    while t < len(text):
        if p < len(tokens) and tokens[p] is ANY_RUN:
            star, resume = p, t
            p += 1
        elif p < len(tokens) and (tokens[p] is ANY_ONE or tokens[p] == text[t]):
            p += 1
            t += 1
        elif star >= 0:
            # Let the last star swallow one more character and retry
            resume += 1
            p, t = star + 1, resume
        else:
            return False
    while p < len(tokens) and tokens[p] is ANY_RUN:
        p += 1
    return p == len(tokens)


class Wildcard:
    """Compiled wildcard pattern."""

    __slots__ = ("case_sensitive", "pattern", "tokens")

    def __init__(self, pattern: str, *, case_sensitive: bool = False) -> None:
        """Compile ``pattern``.

        Raises:
            WildcardPatternException: If the pattern ends with a lone escape.
        """
        self.pattern = pattern
        self.case_sensitive = case_sensitive
        self.tokens = _compile(pattern, case_sensitive)

    def matches(self, text: str) -> bool:
        """Return True if the whole ``text`` matches the pattern."""
        return _match(self.tokens, _fold(text, self.case_sensitive))

    def search(self, text: str) -> bool:
        """Return True if the pattern matches anywhere inside ``text``."""
        return _match((ANY_RUN, *self.tokens, ANY_RUN), _fold(text, self.case_sensitive))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Wildcard):
            return NotImplemented
        return (self.pattern, self.case_sensitive) == (other.pattern, other.case_sensitive)

    def __hash__(self) -> int:
        return hash((self.pattern, self.case_sensitive))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.pattern!r}, case_sensitive={self.case_sensitive})"


def is_wildcard(text: str) -> bool:
    """Return True if ``text`` contains an unescaped ``*`` or ``?``."""
    chars = iter(text)
    for char in chars:
        if char == ESCAPE:
            next(chars, None)
        elif char in "*?":
            return True
    return False


def wildcard_match(pattern: str, text: str, *, case_sensitive: bool = False) -> bool:
    """Match ``text`` against ``pattern`` using the compiled-pattern cache."""
    return _match(_compile(pattern, case_sensitive), _fold(text, case_sensitive))
