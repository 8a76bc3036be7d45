"""
Abstracciones (Protocols) para hablar con el modelo de lenguaje.

El engine y las rutas dependen solo de `CompletionGateway`; la
implementación concreta (OpenAI) vive en `workflow_copilot.llm_client` y en
los tests se reemplaza por un fake.
"""

from __future__ import annotations

from typing import List, Protocol

from ..domain_models import ChatMessage


class CompletionGateway(Protocol):
    """
    Interfaz mínima de un proveedor de chat completions.

    Cada implementación debe:
    - Enviar los mensajes tal cual (system + user)
    - Devolver el texto de la primera respuesta
    - Convertir cualquier falla en `errors.CompletionError`
    """

    def complete(
        self,
        messages: List[ChatMessage],
        *,
        temperature: float,
        max_tokens: int,
    ) -> str:
        """
        Pide una respuesta al modelo.

        Args:
            messages: Mensajes de chat en orden (`role`, `content`).
            temperature: Temperatura de muestreo.
            max_tokens: Límite de tokens de la respuesta.

        Returns:
            Texto devuelto por el modelo ("" si vino vacío).

        Raises:
            CompletionError: Si la llamada falla por cualquier motivo.
        """
        ...
