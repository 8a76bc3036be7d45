from __future__ import annotations

"""
workflow_copilot.domain_models
==============================

Modelos de dominio (dataclasses) que viajan entre el engine, el validador
y la capa HTTP.

Principios de diseño
--------------------
- Dataclasses sin lógica pesada: este módulo NO habla con OpenAI ni hace IO.
- Los documentos de workflow NO se modelan: llegan como JSON arbitrario
  (posiblemente malformado) y se tratan como `Any`.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


# ============================================================
# Mensajes para el modelo
# ============================================================

ChatMessage = Dict[str, str]
"""Mensaje de chat con claves `role` ("system" | "user") y `content`."""


# ============================================================
# Resultados
# ============================================================

@dataclass
class ValidationResult:
    """
    Resultado de la validación estructural de un workflow.

    Attributes:
        issues:
            Problemas encontrados, en el orden en que se detectaron:
            primero el array de nodos, luego `connections`, luego cada nodo
            por índice ascendente.
    """

    issues: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        """`True` si y solo si no hay issues."""
        return not self.issues

    def to_dict(self) -> Dict[str, Any]:
        return {"valid": self.valid, "issues": list(self.issues)}


@dataclass
class GeneratedWorkflow:
    """
    Salida de `engine.generate_workflow`.

    Attributes:
        workflow:
            Documento parseado, o el texto crudo del modelo si `raw` es True.
        raw:
            True cuando la salida del modelo no era JSON válido.
    """

    workflow: Any
    raw: bool = False
