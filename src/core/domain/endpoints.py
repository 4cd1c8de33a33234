"""Registro estático de endpoints.

Por qué una tabla de despacho:
- Cada miembro de `Endpoint` tiene un único `EndpointDescriptor`; `_check_registry`
  corre al importar, así que un miembro sin descriptor rompe el arranque, no un
  request.
- Las URLs se construyen una sola vez, aquí, y todas las llamadas las reutilizan.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping
from urllib.parse import urlsplit

from core.domain.models import EndpointDescriptor, HTTPHeaderField, HTTPMethod
from core.errors import ConfigError

BASE_URL = "https://jsonplaceholder.typicode.com"


def build_url(base: str, suffix: str) -> str:
    """Concatena `base + suffix` y valida que sea una URL absoluta http(s).

    Raises:
        ConfigError: si el resultado no es una URL utilizable.
    """

    url = base + suffix
    if not url or any(ch.isspace() for ch in url):
        raise ConfigError(f"Invalid URL: {url!r}")
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise ConfigError(f"Invalid URL: {url!r}") from exc
    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise ConfigError(f"Invalid URL: {url!r}")
    return url


class Endpoint(str, Enum):
    """Operaciones soportadas por la API."""

    USERS = "users"
    POSTS = "posts"
    CREATE = "create"

    @property
    def descriptor(self) -> EndpointDescriptor:
        return endpoint_descriptor(self)

    @property
    def url(self) -> str:
        return self.descriptor.url

    @property
    def http_method(self) -> HTTPMethod:
        return self.descriptor.http_method

    @property
    def is_json_encoded(self) -> bool:
        return self.descriptor.is_json_encoded

    @property
    def headers(self) -> dict[str, str]:
        return dict(self.descriptor.headers)


class APIFullURLs:
    """Sufijos registrados, ya compuestos contra `BASE_URL`."""

    users = build_url(BASE_URL, "/users")
    posts = build_url(BASE_URL, "/posts")


_JSON = HTTPHeaderField.JSON.value

_REGISTRY: Mapping[Endpoint, EndpointDescriptor] = MappingProxyType(
    {
        Endpoint.USERS: EndpointDescriptor(
            url=APIFullURLs.users,
            http_method=HTTPMethod.GET,
            is_json_encoded=False,
            headers={HTTPHeaderField.ACCEPT_TYPE.value: _JSON},
        ),
        Endpoint.POSTS: EndpointDescriptor(
            url=APIFullURLs.posts,
            http_method=HTTPMethod.GET,
            is_json_encoded=False,
            headers={HTTPHeaderField.CONTENT_TYPE.value: _JSON},
        ),
        Endpoint.CREATE: EndpointDescriptor(
            url=APIFullURLs.posts,
            http_method=HTTPMethod.POST,
            is_json_encoded=True,
            headers={
                HTTPHeaderField.ACCEPT_TYPE.value: _JSON,
                HTTPHeaderField.CONTENT_TYPE.value: f"{_JSON}; charset=UTF-8",
            },
        ),
    }
)


def _check_registry(members: Iterable[Endpoint], registry: Mapping[Endpoint, EndpointDescriptor]) -> None:
    missing = [m.name for m in members if m not in registry]
    if missing:
        raise ConfigError(f"Endpoints without descriptor: {', '.join(missing)}")


_check_registry(Endpoint, _REGISTRY)


def endpoint_descriptor(endpoint: Endpoint) -> EndpointDescriptor:
    """Devuelve el descriptor registrado para `endpoint`."""

    return _REGISTRY[endpoint]
