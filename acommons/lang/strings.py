"""String helpers."""

from __future__ import annotations

import hashlib

from acommons.core.exceptions import ArgumentException, require_argument

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def contains(text: str, sub: str, *, case_sensitive: bool = True) -> bool:
    """Return True if ``sub`` occurs in ``text``. An empty ``sub`` always does."""
    if case_sensitive:
        return sub in text
    return sub.casefold() in text.casefold()


def index_of(text: str, sub: str, start: int = 0) -> int:
    """Return the index of ``sub`` in ``text`` at or after ``start``, or -1."""
    return text.find(sub, start)


def count_occurrences(text: str, sub: str) -> int:
    """Count non-overlapping occurrences of ``sub``. An empty ``sub`` counts 0."""
    if not sub:
        return 0
    return text.count(sub)


def replace_all(text: str, target: str, replacement: str) -> str:
    """Replace every occurrence of ``target``.

    Raises:
        ArgumentException: If target is empty.
    """
    require_argument(bool(target), "target must not be empty")
    return text.replace(target, replacement)


def trim_whitespace(text: str) -> str:
    """Strip leading and trailing whitespace, newlines included."""
    return text.strip()


def is_blank(text: str | None) -> bool:
    """Return True for None, an empty string or whitespace only."""
    return text is None or not text.strip()


def ascii_lowercase(text: str) -> str:
    """Lowercase A-Z only; every other code point is left as is.

    Unlike str.lower() this never changes length or touches non-ASCII
    letters, which matters for host names and protocol tokens.
    """
    return text.translate(_ASCII_LOWER)


def split_with_escape(text: str, separator: str, escape: str = "\\") -> list[str]:
    """Split ``text`` on ``separator``, honouring ``escape``.

    The escape character makes the following character literal and is
    itself dropped. A trailing escape with nothing after it is kept.

    Example:
        >>> split_with_escape(r"a,b\\,c,d", ",")
        ['a', 'b,c', 'd']

    Raises:
        ArgumentException: If separator or escape is not a single character,
            or both are the same character.
    """
    if len(separator) != 1 or len(escape) != 1:
        raise ArgumentException(
            detail="separator and escape must be single characters",
            extra={"separator": separator, "escape": escape},
        )
    require_argument(separator != escape, "separator and escape must differ", separator=separator)

    parts: list[str] = []
    current: list[str] = []
    chars = iter(text)
    for char in chars:
        if char == escape:
            following = next(chars, None)
            current.append(escape if following is None else following)
        elif char == separator:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    parts.append("".join(current))
    return parts


def truncate(text: str, max_length: int, ellipsis: str = "…") -> str:
    """Shorten ``text`` to at most ``max_length`` characters.

    Raises:
        ArgumentException: If max_length cannot fit the ellipsis.
    """
    require_argument(
        max_length >= len(ellipsis),
        "max_length must be at least the ellipsis length",
        max_length=max_length,
        ellipsis=ellipsis,
    )
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ellipsis)] + ellipsis


def sha256_hex(text: str) -> str:
    """Lowercase hex SHA-256 digest of the UTF-8 encoded text."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def md5_hex(text: str) -> str:
    """Lowercase hex MD5 digest of the UTF-8 encoded text (not for security)."""
    return hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()
