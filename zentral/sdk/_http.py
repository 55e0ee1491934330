"""Internal HTTP client wrapper for the Zentral SDK.

This module provides a thin wrapper around httpx to handle connection
pooling, transport errors and response body handling consistently across
the SDK.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from .exceptions import ConnectionError

# Unread bytes drained before closing a response, so that its connection
# can go back to the pool.
MAX_DRAIN_BYTES = 2 << 10


@dataclass
class TimeoutConfig:
    """Configuration for HTTP request timeouts."""

    read: float = 30.0
    connect: float = 10.0
    write: float = 30.0
    pool: float = 30.0

    def to_httpx(self) -> httpx.Timeout:
        return httpx.Timeout(
            read=self.read,
            connect=self.connect,
            write=self.write,
            pool=self.pool,
        )


class HTTPClient:
    """Async HTTP client with connection pooling and error handling.

    Parameters
    ----------
    timeout_config : TimeoutConfig, optional
        Timeouts of the underlying ``httpx.AsyncClient``
    transport : httpx.AsyncBaseTransport, optional
        Transport of the underlying client, e.g. ``httpx.MockTransport`` in
        tests
    client : httpx.AsyncClient, optional
        An existing client to use. It is not closed by :meth:`close`.
    """

    def __init__(
        self,
        timeout_config: TimeoutConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self._client: httpx.AsyncClient | None = client
        self._owns_client = client is None
        self._transport = transport
        self.timeout_config = timeout_config or TimeoutConfig()

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout_config.to_httpx(),
                transport=self._transport,
            )
        return self._client

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send the request and return the response with an unread body."""
        try:
            return await self.client.send(request, stream=True)
        except httpx.TransportError as exc:
            raise ConnectionError(str(request.url), exc) from exc

    async def read(self, response: httpx.Response) -> bytes:
        """Read the whole response body."""
        try:
            return await response.aread()
        except httpx.TransportError as exc:
            raise ConnectionError(str(response.request.url), exc) from exc

    async def stream_to(self, response: httpx.Response, sink: Any) -> None:
        """Copy the raw response body into ``sink``, chunk by chunk."""
        try:
            async for chunk in response.aiter_bytes():
                sink.write(chunk)
        except httpx.TransportError as exc:
            raise ConnectionError(str(response.request.url), exc) from exc

    async def drain_and_close(self, response: httpx.Response) -> None:
        """Drain a bounded amount of the unread body, then close the response.

        The body is only drained when its length is unknown or small enough,
        so a large or slow body never holds up the caller.
        """
        if not response.is_stream_consumed and not response.is_closed:
            length = response.headers.get("Content-Length")
            if length is None or (length.isdigit() and int(length) <= MAX_DRAIN_BYTES):
                drained = 0
                try:
                    async for chunk in response.aiter_raw():
                        drained += len(chunk)
                        if drained >= MAX_DRAIN_BYTES:
                            break
                except (httpx.TransportError, httpx.StreamError):
                    pass
        await response.aclose()

    async def close(self) -> None:
        """Close the underlying HTTP client and release resources."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None
        self._owns_client = True

    async def aclose(self) -> None:
        """Alias for close() to match expected interface."""
        await self.close()
