"""Errores del pipeline de requests.

Por qué una jerarquía cerrada:
- Cada llamada termina en exactamente un valor o exactamente uno de estos errores.
- Los consumidores pueden capturar `NetworkRequestError` una vez, o distinguir por tipo.
"""

from __future__ import annotations


class NetworkRequestError(Exception):
    """Base of every failure the pipeline can surface."""


class ConfigError(NetworkRequestError):
    """Endpoint configuration is broken (bad base URL + suffix).

    Raised at import/startup, never while serving a request.
    """


class BadURLError(NetworkRequestError):
    """Query-string assembly produced an URL that cannot be used."""


class TransportError(NetworkRequestError):
    """The network exchange failed."""


class NoConnectionError(TransportError):
    """Could not reach the host (DNS, refused connection, offline)."""


class RequestTimeoutError(TransportError):
    """The transport gave up waiting for the server."""


class HTTPStatusError(TransportError):
    """Server answered with a non-2xx status."""

    def __init__(self, status_code: int, body: bytes = b"") -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class DecodeError(NetworkRequestError):
    """Response bytes do not match the requested type."""

    def __init__(self, target: str, detail: str) -> None:
        super().__init__(f"cannot decode response as {target}: {detail}")
        self.target = target
