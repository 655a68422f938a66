"""The result of an HTTP request."""

from __future__ import annotations

from dataclasses import dataclass, field

from cprkit.error import Error


@dataclass
class Response:
    """Status, body, headers, final URL, timing, cookies and error of a request."""

    status_code: int = 0
    text: str = ""
    header: dict[str, str] = field(default_factory=dict)
    url: str = ""
    elapsed: float = 0.0
    cookies: dict[str, str] = field(default_factory=dict)
    error: Error = field(default_factory=Error)