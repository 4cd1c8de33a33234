"""Exportación JSON de resultados decodificados.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines (jq, notebooks).
- Los modelos Pydantic se vuelcan con sus alias, igual que llegaron del wire.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter


def to_jsonable(payload: Any) -> Any:
    """Convierte modelos/listas de modelos a estructuras JSON puras."""

    return TypeAdapter(Any).dump_python(payload, mode="json", by_alias=True)


def export_json(*, payload: Any, output_path: Path) -> Path:
    """Exporta `payload` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(to_jsonable(payload), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
