"""Port: asynchronous HTTP transport supplied by the host environment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class HttpRequest:
    """A fully built HTTP request, ready to dispatch."""

    method: str
    url: str
    headers: tuple[tuple[str, str], ...]
    body: bytes
    mode: str = 'cors'

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None


class TransportResponse(Protocol):
    """Response whose body has not necessarily been read yet."""

    @property
    def status_code(self) -> int: ...

    async def read(self) -> bytes:
        """Read the full body. Raises if the stream ends early."""
        ...


class Transport(Protocol):
    """Abstract transport. Zero framework types leak through."""

    async def send(self, request: HttpRequest) -> TransportResponse:
        """Dispatch the request and return once response headers arrive."""
        ...
