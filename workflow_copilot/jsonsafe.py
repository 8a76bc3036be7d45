"""
JSON estricto para lo que entra y sale del servicio.

El módulo `json` de Python acepta cosas que no son JSON estándar y que
después no se pueden volver a serializar en una respuesta:
- constantes `NaN`, `Infinity`, `-Infinity` (y números como `1e999`, que
  terminan en `inf`),
- escapes de surrogates sueltos (`"\\ud800"`), que no se codifican en UTF-8.

`loads_strict` las rechaza al parsear; `ensure_json_safe` las detecta en un
valor ya parseado (por ejemplo, el body que parseó FastAPI).
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _check_text(text: str) -> None:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValueError(f"String is not valid UTF-8: {e.reason}") from e


def ensure_json_safe(value: Any) -> None:
    """
    Verifica que `value` se pueda serializar como JSON estándar en UTF-8.

    Raises:
        ValueError: Si hay floats no finitos o strings con surrogates sueltos.
    """
    if isinstance(value, str):
        _check_text(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Non-finite number: {value}")
    elif isinstance(value, Mapping):
        for key, item in value.items():
            if isinstance(key, str):
                _check_text(key)
            ensure_json_safe(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            ensure_json_safe(item)


def loads_strict(text: str) -> Any:
    """
    Parsea `text` como JSON estándar.

    Raises:
        ValueError: Si no es JSON válido (`json.JSONDecodeError`) o si usa
            constantes no estándar o surrogates sueltos.
    """
    value = json.loads(text, parse_constant=_reject_constant)
    ensure_json_safe(value)
    return value
