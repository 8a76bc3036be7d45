"""
Excepciones del servicio.

- `CompletionError`: cualquier falla del modelo externo (auth, rate-limit,
  red, respuesta malformada). No se distingue por subtipo hacia afuera.
- `ApiError`: error ya traducido al sobre HTTP `{"error", "message"}`.
  Lo levantan las rutas y lo renderiza el handler registrado en `api.main`.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

INVALID_BODY_ERROR = "Invalid request body"


class CompletionError(RuntimeError):
    """Falla al obtener una respuesta del modelo de lenguaje."""


class ApiError(Exception):
    def __init__(self, status_code: int, error: str, message: Optional[str] = None):
        super().__init__(error if message is None else f"{error}: {message}")
        self.status_code = status_code
        self.error = error
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error}
        if self.message is not None:
            body["message"] = self.message
        return body
