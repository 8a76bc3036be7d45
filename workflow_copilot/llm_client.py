from __future__ import annotations

import logging
from typing import List, Optional

from openai import OpenAI, OpenAIError

from .config import Settings, get_settings
from .domain_models import ChatMessage
from .errors import CompletionError

logger = logging.getLogger(__name__)


def get_client(settings: Settings) -> OpenAI:
    if not settings.openai_api_key:
        raise CompletionError("OPENAI_API_KEY is not configured")
    # Sin reintentos: una falla del proveedor se reporta tal cual
    return OpenAI(api_key=settings.openai_api_key, max_retries=0)


class OpenAICompletionGateway:
    """
    `CompletionGateway` respaldado por chat.completions de OpenAI.

    El cliente del SDK se crea recién en la primera llamada, así el servicio
    arranca aunque falte la API key y el error aparece como una falla del
    gateway (500) en el endpoint que la necesitó.
    """

    def __init__(self, settings: Optional[Settings] = None, client: Optional[OpenAI] = None):
        self.settings = settings or get_settings()
        self._client = client

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self._client = get_client(self.settings)
        return self._client

    def complete(
        self,
        messages: List[ChatMessage],
        *,
        temperature: float,
        max_tokens: int,
    ) -> str:
        logger.debug(
            f"chat.completions model={self.settings.openai_model_text} "
            f"temperature={temperature} max_tokens={max_tokens}"
        )
        try:
            completion = self.client.chat.completions.create(
                model=self.settings.openai_model_text,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens,
            )
            content = completion.choices[0].message.content
        except OpenAIError as e:
            raise CompletionError(str(e)) from e
        except (IndexError, AttributeError) as e:
            raise CompletionError(f"Malformed completion response: {e}") from e

        return content or ""
