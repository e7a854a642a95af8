"""Punycode and IDNA conversion for labels, domains and URLs.

Raw RFC 3492 encoding comes from the standard ``punycode`` codec; the
domain helpers apply it label by label with the ``xn--`` ACE prefix, and
the URL helpers convert only the host part of a URL.

Example:
    >>> idna_encode("пример.рф")
    'xn--e1afmkfd.xn--p1ai'
    >>> decode_url("https://xn--e1afmkfd.xn--p1ai/path?q=1")
    'https://пример.рф/path?q=1'
"""

from __future__ import annotations

from collections.abc import Callable
import re
from urllib.parse import urlsplit, urlunsplit

from acommons.core.exceptions import PunycodeException
from acommons.lang.strings import ascii_lowercase

ACE_PREFIX = "xn--"
MAX_LABEL_LENGTH = 63

# Full stop plus the ideographic and fullwidth dots accepted as separators
_LABEL_SEPARATORS = re.compile("[.。．｡]")


def punycode_encode(text: str) -> str:
    """Encode ``text`` with raw punycode (no ACE prefix)."""
    return text.encode("punycode").decode("ascii")


def punycode_decode(text: str) -> str:
    """Decode raw punycode (no ACE prefix).

    Raises:
        PunycodeException: If the input is not valid punycode.
    """
    try:
        return text.encode("ascii").decode("punycode")
    except (UnicodeError, ValueError) as e:
        raise PunycodeException(
            detail=f"Invalid punycode: {text!r}",
            extra={"value": text},
        ) from e


def _split_labels(domain: str) -> tuple[list[str], bool]:
    labels = _LABEL_SEPARATORS.split(domain)
    trailing_dot = len(labels) > 1 and labels[-1] == ""
    if trailing_dot:
        labels.pop()
    if any(not label for label in labels):
        raise PunycodeException(
            detail=f"Domain contains an empty label: {domain!r}",
            extra={"domain": domain},
        )
    return labels, trailing_dot


def _encode_label(label: str) -> str:
    if label.isascii():
        encoded = ascii_lowercase(label)
    else:
        encoded = ACE_PREFIX + punycode_encode(label.lower())
    if len(encoded) > MAX_LABEL_LENGTH:
        raise PunycodeException(
            detail=f"Label exceeds {MAX_LABEL_LENGTH} characters once encoded: {label!r}",
            extra={"label": label, "encoded_length": len(encoded)},
        )
    return encoded


def _decode_label(label: str) -> str:
    if label[: len(ACE_PREFIX)].lower() == ACE_PREFIX:
        return punycode_decode(label[len(ACE_PREFIX) :])
    return label


def idna_encode(domain: str) -> str:
    """Convert a Unicode domain into its ASCII (ACE) form.

    ASCII labels are lowercased, others become ``xn--`` + punycode of the
    lowercased label. A trailing dot is kept.

    Raises:
        PunycodeException: On empty inner labels or labels longer than 63 octets.
    """
    if not domain:
        return domain
    labels, trailing_dot = _split_labels(domain)
    result = ".".join(_encode_label(label) for label in labels)
    return result + "." if trailing_dot else result


def idna_decode(domain: str) -> str:
    """Convert ``xn--`` labels of an ASCII domain back to Unicode.

    Raises:
        PunycodeException: On empty inner labels or invalid punycode.
    """
    if not domain:
        return domain
    labels, trailing_dot = _split_labels(domain)
    result = ".".join(_decode_label(label) for label in labels)
    return result + "." if trailing_dot else result


def _convert_host(url: str, convert: Callable[[str], str]) -> str:
    parts = urlsplit(url)
    netloc = parts.netloc
    if not netloc:
        return url

    userinfo, at, hostport = netloc.rpartition("@")
    if hostport.startswith("["):
        # IPv6 literals are never converted
        return url
    host, colon, port = hostport.partition(":")
    if not host:
        return url

    new_netloc = f"{userinfo}{at}{convert(host)}{colon}{port}"
    return urlunsplit(parts._replace(netloc=new_netloc))


def encode_url(url: str) -> str:
    """Return ``url`` with its host converted by idna_encode().

    Scheme, userinfo, port, path, query and fragment are left untouched.
    """
    return _convert_host(url, idna_encode)


def decode_url(url: str) -> str:
    """Return ``url`` with its host converted by idna_decode()."""
    return _convert_host(url, idna_decode)
