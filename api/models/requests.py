"""
Modelos de request para la API.

Todos los campos son opcionales a nivel de tipo: la presencia de los campos
requeridos la chequea cada ruta, para devolver el mensaje 400 fijo que
esperan los clientes en lugar del 422 por defecto de FastAPI.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class GenerateWorkflowRequest(BaseModel):
    """Request para generar un workflow desde lenguaje natural."""

    prompt: Optional[str] = Field(default=None, description="Descripción del workflow a generar")
    context: Optional[str] = Field(default=None, description="Contexto adicional para el modelo")


class ImproveWorkflowRequest(BaseModel):
    """Request para mejorar un workflow existente."""

    workflow: Any = Field(default=None, description="Workflow n8n actual (JSON)")
    improvement: Optional[str] = Field(default=None, description="Mejora pedida en lenguaje natural")


class WorkflowRequest(BaseModel):
    """Request con un único workflow (explicar / validar)."""

    workflow: Any = Field(default=None, description="Workflow n8n (JSON)")
