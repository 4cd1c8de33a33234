"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Los descriptores de endpoints se validan una sola vez, al construir el
  registro: un campo faltante falla al importar, no en el primer request.
- Las formas de respuesta (User, Post) sirven como tipos destino del decoder.

Nota:
- Estos modelos describen *qué* se pide y *qué* se recibe, no *cómo* viaja.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

ParamValue = Union[str, int, float, bool]
Params = Mapping[str, ParamValue]


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class HTTPHeaderField(str, Enum):
    """Header names (and the JSON media type) used by endpoint declarations."""

    AUTHENTICATION = "Authentication"
    CONTENT_TYPE = "Content-Type"
    ACCEPT_TYPE = "Accept"
    ACCEPT_ENCODING = "Accept-Encoding"
    AUTHORIZATION = "Authorization"
    ACCEPT_LANGUAGE = "Accept-Language"
    USER_AGENT = "User-Agent"
    JSON = "application/json"


class EndpointDescriptor(BaseModel):
    """Descriptor estático de una operación de la API.

    Todos los campos son obligatorios: un endpoint nuevo no puede registrarse
    sin URL, método, modo de encoding y headers.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(
        ...,
        min_length=1,
        description="URL absoluta del endpoint (base + sufijo).",
    )
    http_method: HTTPMethod = Field(
        ...,
        description="Método HTTP de la operación.",
    )
    is_json_encoded: bool = Field(
        ...,
        description="True: params viajan como body JSON. False: como query string.",
    )
    headers: Mapping[str, str] = Field(
        ...,
        description="Headers aplicados tal cual a cada request (solo lectura).",
    )

    @field_validator("headers", mode="after")
    @classmethod
    def _freeze_headers(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))


@dataclass(frozen=True)
class OutboundRequest:
    """Request listo para el transporte. Se construye por llamada y no se reutiliza."""

    method: HTTPMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


class User(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    username: str
    email: str


class Post(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int
    user_id: int = Field(..., alias="userId")
    title: str
    body: str
