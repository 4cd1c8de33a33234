"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y redirects en un único builder.
- Traduce las excepciones de httpx a la taxonomía del Core (`TransportError`).
- Facilita testeo: se puede inyectar un `httpx.AsyncClient` con `MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.domain.models import OutboundRequest
from core.errors import HTTPStatusError, NoConnectionError, RequestTimeoutError, TransportError

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los endpoints se comporten igual.
    - `transport` permite enchufar `httpx.MockTransport` en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=settings.follow_redirects,
        headers=headers,
        transport=transport,
    )


class HttpxTransport:
    """Implementación de `core.interfaces.transport.Transport` sobre httpx.

    Un intento por request, sin reintentos. Los status fuera de 2xx son error
    aunque el body sea JSON válido.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        settings: AppSettings | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or build_async_client(settings)

    async def send(self, request: OutboundRequest) -> bytes:
        try:
            response = await self._client.request(
                request.method.value,
                request.url,
                headers=request.headers,
                content=request.body,
            )
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(f"{request.method.value} {request.url}: {exc}") from exc
        except httpx.ConnectError as exc:
            raise NoConnectionError(f"{request.method.value} {request.url}: {exc}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"{request.method.value} {request.url}: {exc}") from exc

        logger.debug("%s %s -> HTTP %s", request.method.value, request.url, response.status_code)
        if not response.is_success:
            raise HTTPStatusError(response.status_code, response.content)
        return response.content

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
