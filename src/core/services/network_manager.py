"""Pipeline request -> transporte -> decoder.

Es el único punto de entrada para los consumidores. El pipeline corta en el
primer fallo y produce exactamente un resultado por llamada: el valor
decodificado o un `NetworkRequestError`.

Contexto de finalización:
- `request` es una corrutina; termina en el event loop que la espera.
- `submit` recibe el loop explícitamente, para llamadores en otro hilo (loops
  de UI, código síncrono). El future devuelto y `on_complete` se resuelven en
  ese loop.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
from typing import Any, Callable, TypeVar

from core.domain.endpoints import Endpoint
from core.domain.models import Params
from core.interfaces.transport import Transport
from core.services.request_assembler import assemble_request
from core.services.response_decoder import ResponseDecoder

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NetworkManager:
    """Ejecuta operaciones del registro contra un transporte inyectado."""

    def __init__(self, transport: Transport, *, decoder: ResponseDecoder | None = None) -> None:
        self._transport = transport
        self._decoder = decoder or ResponseDecoder()

    async def request(
        self,
        endpoint: Endpoint,
        params: Params | None = None,
        *,
        response_type: type[T],
    ) -> T:
        """Build, send and decode one request.

        Raises:
            BadURLError: assembly failed; the transport is never called.
            TransportError: the exchange failed; the decoder is never called.
            DecodeError: the body does not match `response_type`.
        """

        outbound = assemble_request(endpoint, params)
        logger.debug("-> %s %s", outbound.method.value, outbound.url)
        content = await self._transport.send(outbound)
        logger.debug("<- %s: %d bytes", endpoint.name, len(content))
        return self._decoder.decode(response_type, content)

    def submit(
        self,
        endpoint: Endpoint,
        params: Params | None = None,
        *,
        response_type: type[T],
        loop: asyncio.AbstractEventLoop,
        on_complete: Callable[["asyncio.Future[T]"], Any] | None = None,
    ) -> "concurrent.futures.Future[T]":
        """Schedule `request` on `loop` from any thread.

        `on_complete` runs once, on `loop`'s thread, with the finished task
        (call `.result()` on it to get the value or re-raise the error). It
        runs before the returned future resolves.
        """

        async def _deliver() -> T:
            task = asyncio.ensure_future(
                self.request(endpoint, params, response_type=response_type)
            )
            if on_complete is not None:
                task.add_done_callback(on_complete)
            return await task

        return asyncio.run_coroutine_threadsafe(_deliver(), loop)
