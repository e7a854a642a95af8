"""URL helpers built on urllib.parse."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import parse_qsl, quote, unquote_plus, urlencode, urlsplit, urlunsplit

DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}


def query_parameters(url: str) -> dict[str, str]:
    """Return the decoded query parameters of ``url``.

    Blank values are kept; for repeated keys the last value wins.
    """
    return dict(parse_qsl(urlsplit(url).query, keep_blank_values=True))


def with_query_parameters(url: str, params: Mapping[str, object | None]) -> str:
    """Return ``url`` with ``params`` merged over its existing query.

    A value of None removes the key. A key that is already present is
    replaced in place; new keys are appended. Parameters that are not
    named in ``params`` keep their original encoding, so ``q=a%20b`` and a
    bare ``flag`` come back unchanged. Scheme, host, path and fragment are
    kept as they are.

    Example:
        >>> with_query_parameters("https://a.com/p?x=1&y=2", {"y": None, "z": 3})
        'https://a.com/p?x=1&z=3'
    """
    parts = urlsplit(url)
    pending = dict(params)
    segments: list[str] = []
    for segment in parts.query.split("&"):
        if not segment:
            continue
        key = unquote_plus(segment.partition("=")[0])
        if key not in params:
            segments.append(segment)
        elif key in pending:
            value = pending.pop(key)
            if value is not None:
                segments.append(urlencode({key: str(value)}))
    segments.extend(
        urlencode({key: str(value)}) for key, value in pending.items() if value is not None
    )
    return urlunsplit(parts._replace(query="&".join(segments)))


def is_http_url(url: str) -> bool:
    """Return True for http(s) URLs that have a host."""
    parts = urlsplit(url)
    return parts.scheme.lower() in ("http", "https") and bool(parts.hostname)


def host_with_port(url: str) -> str | None:
    """Return ``host`` or ``host:port`` when the port is not the scheme default.

    Returns None when the URL has no host. Invalid ports are ignored.
    """
    parts = urlsplit(url)
    host = parts.hostname
    if not host:
        return None
    try:
        port = parts.port
    except ValueError:
        port = None
    if ":" in host:
        host = f"[{host}]"
    if port is None or DEFAULT_PORTS.get(parts.scheme.lower()) == port:
        return host
    return f"{host}:{port}"


def domain(url: str, *, strip_www: bool = False) -> str | None:
    """Return the lowercased host of ``url``, optionally without ``www.``."""
    host = urlsplit(url).hostname
    if not host:
        return None
    if strip_www and host.startswith("www."):
        host = host[4:]
    return host


def append_path(url: str, *segments: str) -> str:
    """Append percent-encoded path segments to ``url``.

    Slashes between the existing path and the segments are collapsed to
    one; query and fragment are preserved. When every segment is empty
    (or there are none) ``url`` is returned unchanged.

    Example:
        >>> append_path("https://a.com/api/?v=1", "filters", "ad list")
        'https://a.com/api/filters/ad%20list?v=1'
    """
    cleaned = [segment.strip("/") for segment in segments]
    cleaned = [segment for segment in cleaned if segment]
    if not cleaned:
        return url
    parts = urlsplit(url)
    path = parts.path.rstrip("/")
    for segment in cleaned:
        path = f"{path}/{quote(segment, safe='')}"
    return urlunsplit(parts._replace(path=path))
