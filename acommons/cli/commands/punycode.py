"""Punycode and IDNA conversion commands."""

from collections.abc import Callable

import click

from acommons.lang.punycode import (
    decode_url,
    encode_url,
    idna_decode,
    idna_encode,
    punycode_decode,
    punycode_encode,
)


def _convert(convert: Callable[[str], str], value: str) -> None:
    click.echo(convert(value))


@click.group(name="punycode")
def punycode() -> None:
    """Convert labels, domains and URLs to and from punycode."""


@punycode.command(name="encode")
@click.argument("text")
def encode_cmd(text: str) -> None:
    """Encode TEXT with raw punycode."""
    _convert(punycode_encode, text)


@punycode.command(name="decode")
@click.argument("text")
def decode_cmd(text: str) -> None:
    """Decode raw punycode TEXT."""
    _convert(punycode_decode, text)


@punycode.command(name="encode-domain")
@click.argument("domain")
def encode_domain_cmd(domain: str) -> None:
    """Convert a Unicode DOMAIN to its xn-- form."""
    _convert(idna_encode, domain)


@punycode.command(name="decode-domain")
@click.argument("domain")
def decode_domain_cmd(domain: str) -> None:
    """Convert the xn-- labels of DOMAIN back to Unicode."""
    _convert(idna_decode, domain)


@punycode.command(name="encode-url")
@click.argument("url")
def encode_url_cmd(url: str) -> None:
    """Convert the host of URL to its xn-- form."""
    _convert(encode_url, url)


@punycode.command(name="decode-url")
@click.argument("url")
def decode_url_cmd(url: str) -> None:
    """Convert the host of URL back to Unicode."""
    _convert(decode_url, url)
