"""Helpers for parsing headers, splitting strings and URL encoding."""

from __future__ import annotations

import string

_UNRESERVED = frozenset((string.ascii_letters + string.digits + "-_.~").encode("ascii"))


def parse_header(headers: str) -> dict[str, str]:
    """Parse a raw block of response headers into a mapping.

    A status line starting with ``HTTP/`` discards everything collected so
    far, so after redirects only the final response's headers remain.
    """
    header: dict[str, str] = {}
    for line in split(headers, "\n"):
        if line.startswith("HTTP/"):
            header.clear()
        name, sep, value = line.partition(":")
        if sep:
            header[name] = value.lstrip("\t ").rstrip("\t\n\r ")
    return header


def split(to_split: str, delimiter: str) -> list[str]:
    """Split ``to_split`` on ``delimiter``, dropping one trailing empty field."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    tokens = to_split.split(delimiter)
    if tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def write_function(data: bytearray, chunk: bytes) -> int:
    """Append a received chunk to ``data`` and return the number of bytes taken."""
    data.extend(chunk)
    return len(chunk)


def url_encode(value: str) -> str:
    """Percent-encode every byte except ASCII letters, digits and ``-_.~``."""
    return "".join(
        chr(byte) if byte in _UNRESERVED else f"%{byte:02x}"
        for byte in value.encode("utf-8")
    )