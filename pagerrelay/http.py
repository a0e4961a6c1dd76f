"""Minimal HTTP GET support collecting a response body."""

from __future__ import annotations

import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass, field

_CHUNK_SIZE = 16 * 1024


@dataclass
class HttpResponse:
    """Response body accumulated from chunks."""

    data: bytearray = field(default_factory=bytearray)

    @property
    def size(self) -> int:
        return len(self.data)

    def write(self, chunk: bytes) -> int:
        """Append *chunk* to the body and return the number of bytes taken."""
        self.data.extend(chunk)
        return len(chunk)

    def text(self) -> str:
        """Return the body decoded as UTF-8."""
        return self.data.decode("utf-8", errors="replace")


def _insecure_context() -> ssl.SSLContext:
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


def fetch(url: str, cookie: str | None = None, timeout: float | None = None) -> HttpResponse:
    """GET *url*, sending *cookie* if given, and return the collected body.

    TLS certificates are not verified. HTTP error statuses still yield their
    body; only transport failures raise (as OSError).
    """
    request = urllib.request.Request(url)
    if cookie:
        request.add_header("Cookie", cookie)

    response = HttpResponse()
    try:
        stream = urllib.request.urlopen(request, timeout=timeout, context=_insecure_context())
    except urllib.error.HTTPError as exc:
        stream = exc
    with stream:
        while chunk := stream.read(_CHUNK_SIZE):
            response.write(chunk)
    return response