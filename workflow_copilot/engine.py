from __future__ import annotations

"""
workflow_copilot.engine
=======================

Operaciones de alto nivel del copiloto, sin HTTP.

Cada función:
1) arma los mensajes (`prompts`),
2) delega en un `CompletionGateway`,
3) post-procesa la salida (parseo JSON cuando corresponde).

La capa HTTP (`api.routes.workflows`) y el CLI (`cli.py`) usan estas funciones;
ninguna de las dos habla directo con OpenAI.

NOTA IMPORTANTE:
----------------
El parseo es asimétrico a propósito: `generate_workflow` tolera una salida
que no es JSON (devuelve el texto crudo marcado como `raw`), mientras que
`improve_workflow` deja propagar el `ValueError`. Se mantiene así
hasta que se decida unificar el comportamiento.

"JSON válido" es JSON estándar (`jsonsafe.loads_strict`): `NaN`, `Infinity`
y surrogates sueltos cuentan como salida inválida.
"""

from typing import Any, Optional

from .core.abstractions import CompletionGateway
from .domain_models import GeneratedWorkflow
from .jsonsafe import loads_strict
from .prompts import (
    build_explain_messages,
    build_generate_messages,
    build_improve_messages,
)

DEFAULT_TEMPERATURE = 0.7
WORKFLOW_MAX_TOKENS = 2000
EXPLANATION_MAX_TOKENS = 1000


def generate_workflow(
    gateway: CompletionGateway,
    prompt: str,
    context: Optional[str] = None,
    *,
    temperature: float = DEFAULT_TEMPERATURE,
) -> GeneratedWorkflow:
    """
    Genera un workflow a partir de una descripción en lenguaje natural.

    Returns:
        GeneratedWorkflow con el documento parseado, o con el texto crudo y
        `raw=True` si el modelo no devolvió JSON válido.

    Raises:
        CompletionError: Si falla la llamada al modelo.
    """
    text = gateway.complete(
        build_generate_messages(prompt, context),
        temperature=temperature,
        max_tokens=WORKFLOW_MAX_TOKENS,
    )

    try:
        return GeneratedWorkflow(workflow=loads_strict(text))
    except ValueError:
        return GeneratedWorkflow(workflow=text, raw=True)


def improve_workflow(
    gateway: CompletionGateway,
    workflow: Any,
    improvement: str,
    *,
    temperature: float = DEFAULT_TEMPERATURE,
) -> Any:
    """
    Aplica una mejora pedida en lenguaje natural sobre un workflow existente.

    Raises:
        CompletionError: Si falla la llamada al modelo.
        ValueError: Si el modelo no devolvió JSON válido.
    """
    text = gateway.complete(
        build_improve_messages(workflow, improvement),
        temperature=temperature,
        max_tokens=WORKFLOW_MAX_TOKENS,
    )
    return loads_strict(text)


def explain_workflow(
    gateway: CompletionGateway,
    workflow: Any,
    *,
    temperature: float = DEFAULT_TEMPERATURE,
) -> str:
    """Devuelve una explicación legible del workflow, tal cual la escribe el modelo."""
    return gateway.complete(
        build_explain_messages(workflow),
        temperature=temperature,
        max_tokens=EXPLANATION_MAX_TOKENS,
    )
