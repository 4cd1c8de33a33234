"""Contrato del transporte HTTP.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El pipeline recibe el transporte inyectado: httpx en producción, dobles en
  tests, sin singleton global.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import OutboundRequest


@runtime_checkable
class Transport(Protocol):
    """Contrato mínimo para ejecutar un request.

    Reglas de diseño:
    - `send` es asíncrono: es el único punto de suspensión del pipeline.
    - Un intento, un resultado: bytes del body o `TransportError`.
    """

    async def send(self, request: OutboundRequest) -> bytes:
        """Ejecuta `request` una vez y devuelve el body crudo de la respuesta."""

        ...
