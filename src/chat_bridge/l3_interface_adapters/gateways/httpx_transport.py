"""Gateway: httpx-backed HTTP transport — implements Transport port."""

from __future__ import annotations

import logging

import httpx

from chat_bridge.l1_entities.errors import ConstructionError, DecodeError, TransportError
from chat_bridge.l2_use_cases.ports.transport import HttpRequest

log = logging.getLogger('cb.transport')


class HttpxResponse:
    """Streamed httpx response. Owns the per-call client and closes it once the body is read."""

    def __init__(self, response: httpx.Response, client: httpx.AsyncClient) -> None:
        self._response = response
        self._client = client

    @property
    def status_code(self) -> int:
        return self._response.status_code

    async def read(self) -> bytes:
        try:
            return await self._response.aread()
        except httpx.HTTPError as e:
            raise DecodeError(f'Response stream ended unexpectedly: {type(e).__name__}: {e}') from e
        finally:
            await self._response.aclose()
            await self._client.aclose()


class HttpxTransport:
    """Wraps httpx.AsyncClient to implement the Transport protocol.

    A fresh client is opened per request, so nothing is shared between calls.
    The request ``mode`` has no meaning outside a browser and is ignored.
    """

    def __init__(
        self,
        timeout: float | None = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    async def send(self, request: HttpRequest) -> HttpxResponse:
        client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        try:
            try:
                http_request = client.build_request(
                    request.method,
                    request.url,
                    headers=list(request.headers),
                    content=request.body,
                )
            except UnicodeEncodeError as e:
                # httpx encodes header values as ASCII
                raise ConstructionError(f'Header value cannot be encoded: {e.reason}') from e
            log.debug('%s %s (%d body bytes)', request.method, request.url, len(request.body))
            response = await client.send(http_request, stream=True)
        except httpx.HTTPError as e:
            await client.aclose()
            log.warning('Transport failure: %s', type(e).__name__)
            raise TransportError(f'{type(e).__name__}: {e}') from e
        except BaseException:
            await client.aclose()
            raise

        log.debug('Response status %d', response.status_code)
        return HttpxResponse(response, client)
