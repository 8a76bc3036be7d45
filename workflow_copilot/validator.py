"""
workflow_copilot.validator
==========================

Validación estructural mínima de documentos de workflow (formato n8n).

Chequea solo la FORMA del documento:
- que exista un array `nodes`,
- que exista un objeto `connections`,
- que cada nodo tenga `type` y `name`.

No valida semántica: no verifica que las conexiones apunten a nodos
existentes ni que los `type` sean tipos de nodo reconocidos.

Todas las reglas se evalúan siempre (no hay corte temprano) y la función es
pura: no hace IO, no muta la entrada y nunca lanza por input malformado.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List

from .domain_models import ValidationResult

NODES_ARRAY_ISSUE = "Workflow must have a nodes array"
CONNECTIONS_OBJECT_ISSUE = "Workflow must have a connections object"


def is_blank(value: Any) -> bool:
    """
    Indica si un valor JSON cuenta como "ausente".

    Sigue la noción de falsy de JSON/JavaScript: `None`, `False`, `0`, `NaN` y `""`.
    A diferencia de Python, `{}` y `[]` NO cuentan como ausentes.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # NaN es falsy en JSON/JS
        return value == 0 or value != value
    return False


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _field(value: Any, key: str) -> Any:
    # Un valor que no es objeto no tiene campos
    if isinstance(value, Mapping):
        return value.get(key)
    return None


def validate_workflow(workflow: Any) -> ValidationResult:
    """
    Valida la estructura de un workflow.

    Args:
        workflow: Cualquier valor JSON (dict, list, str, None, ...).

    Returns:
        ValidationResult con la lista ordenada de issues.
    """
    issues: List[str] = []

    nodes = _field(workflow, "nodes")
    connections = _field(workflow, "connections")

    if not _is_sequence(nodes):
        issues.append(NODES_ARRAY_ISSUE)

    if not isinstance(connections, Mapping):
        issues.append(CONNECTIONS_OBJECT_ISSUE)

    if _is_sequence(nodes):
        for index, node in enumerate(nodes):
            if is_blank(_field(node, "type")):
                issues.append(f"Node at index {index} is missing a type")
            if is_blank(_field(node, "name")):
                issues.append(f"Node at index {index} is missing a name")

    return ValidationResult(issues=issues)
