"""
Piezas genéricas del servicio que no dependen de HTTP:

- Abstracciones (Protocols) del proveedor de LLM
"""

from .abstractions import CompletionGateway

__all__ = ["CompletionGateway"]
