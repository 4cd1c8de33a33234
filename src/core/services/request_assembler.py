"""Construcción de requests a partir de un endpoint y sus parámetros.

Funciones puras: sin red y sin estado compartido. Cada llamada devuelve un
`OutboundRequest` nuevo.
"""

from __future__ import annotations

import json
import logging
import math
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from core.domain.endpoints import Endpoint
from core.domain.models import OutboundRequest, Params, ParamValue
from core.errors import BadURLError

logger = logging.getLogger(__name__)


def coerce_param(key: str, value: ParamValue) -> str:
    """String form of a parameter value for the query string.

    bool must be checked before int (bool is an int subclass). NaN and
    infinities have no JSON form and are rejected in both modes.
    """

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"Parameter {key!r} must be a finite number, got {value!r}")
    if isinstance(value, (int, float)):
        return str(value)
    raise TypeError(
        f"Parameter {key!r} has unsupported type {type(value).__name__}; "
        "expected str, int, float or bool"
    )


def _check_json_params(params: Params) -> None:
    for key, value in params.items():
        if not isinstance(key, str):
            raise TypeError(f"Parameter names must be str, got {type(key).__name__}")
        coerce_param(key, value)


def encode_json_body(params: Params) -> bytes:
    _check_json_params(params)
    return json.dumps(
        dict(params), separators=(",", ":"), ensure_ascii=False, allow_nan=False
    ).encode("utf-8")


def append_query(url: str, params: Params) -> str:
    """Añade `params` como query string, conservando la query existente."""

    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if not isinstance(key, str):
            raise TypeError(f"Parameter names must be str, got {type(key).__name__}")
        if not key:
            raise BadURLError("Query parameter name cannot be empty")
        pairs.append((key, coerce_param(key, value)))

    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise BadURLError(f"Cannot build URL from {url!r}") from exc
    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise BadURLError(f"Cannot build URL from {url!r}")
    if not pairs:
        return url

    query = parse_qsl(parts.query, keep_blank_values=True) + pairs
    return urlunsplit(parts._replace(query=urlencode(query)))


def assemble_request(endpoint: Endpoint, params: Params | None = None) -> OutboundRequest:
    """Build the outbound request for `endpoint`.

    - JSON mode: params become the body, URL untouched.
    - Query mode: params become query items, no body.

    Raises:
        BadURLError: query-string mode produced an unusable URL.
        TypeError: a parameter value is not str/int/float/bool.
        ValueError: a float parameter is NaN or infinite.
    """

    descriptor = endpoint.descriptor
    url = descriptor.url
    body: bytes | None = None

    if descriptor.is_json_encoded:
        if params is not None:
            body = encode_json_body(params)
    elif params is not None:
        url = append_query(descriptor.url, params)

    logger.debug("assembled %s %s (body=%s)", descriptor.http_method.value, url, body is not None)
    return OutboundRequest(
        method=descriptor.http_method,
        url=url,
        headers=dict(descriptor.headers),
        body=body,
    )
