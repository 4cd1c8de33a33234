"""Decodificación estructural de respuestas JSON.

Modo estricto: un payload que no encaja con el tipo pedido falla completo.
Nada de valores parciales ni de coerciones tipo "1" -> 1.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from core.errors import DecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=128)
def _adapter_for(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def _type_name(response_type: Any) -> str:
    return getattr(response_type, "__name__", None) or repr(response_type)


class ResponseDecoder:
    """Convierte bytes en una instancia de `response_type` (modelo, TypedDict, list[...], ...)."""

    def decode(self, response_type: type[T], content: bytes) -> T:
        target = _type_name(response_type)
        logger.debug("decoding %d bytes as %s", len(content), target)
        try:
            adapter = _adapter_for(response_type)
        except TypeError as exc:
            # Unhashable type hints skip the cache.
            logger.debug("uncached adapter for %s: %s", target, exc)
            adapter = TypeAdapter(response_type)
        try:
            return adapter.validate_json(content, strict=True)
        except ValidationError as exc:
            raise DecodeError(target, str(exc)) from exc
