"""
Endpoints del copiloto de workflows n8n.

Este módulo maneja:
- POST /api/generate-workflow - Generar un workflow desde lenguaje natural
- POST /api/improve-workflow  - Aplicar una mejora a un workflow
- POST /api/explain-workflow  - Explicar un workflow en lenguaje simple
- POST /api/validate-workflow - Validar la estructura de un workflow

Convenciones de error:
- Falta un campo requerido → 400 `{"error": <mensaje fijo>}`
- Body que no es JSON estándar → 400 `{"error": "Invalid request body", "message": ...}`
- Falla del modelo o inesperada → 500 `{"error": <mensaje fijo>, "message": <detalle>}`
- Issues de validación NO son error: 200 con `valid: false`
"""

import logging
from typing import Optional, Type, TypeVar

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel

from workflow_copilot.config import Settings
from workflow_copilot.core.abstractions import CompletionGateway
from workflow_copilot.engine import explain_workflow, generate_workflow, improve_workflow
from workflow_copilot.errors import INVALID_BODY_ERROR, ApiError
from workflow_copilot.jsonsafe import ensure_json_safe
from workflow_copilot.validator import is_blank, validate_workflow

from ..dependencies import get_app_settings, get_gateway
from ..models.requests import GenerateWorkflowRequest, ImproveWorkflowRequest, WorkflowRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["workflows"])

RAW_WORKFLOW_WARNING = "Generated content may not be valid JSON"

RequestModel = TypeVar("RequestModel", bound=BaseModel)


def _checked_body(req: Optional[RequestModel], model: Type[RequestModel]) -> RequestModel:
    """
    Normaliza el body (ausente → modelo vacío) y rechaza con 400 lo que no
    se podría devolver como JSON estándar (`NaN`, `Infinity`, surrogates sueltos).
    """
    req = req or model()
    try:
        ensure_json_safe(req.model_dump())
    except ValueError as e:
        raise ApiError(400, INVALID_BODY_ERROR, str(e)) from e
    return req


@router.post("/generate-workflow")
def generate_workflow_endpoint(
    req: Optional[GenerateWorkflowRequest] = Body(default=None),
    gateway: CompletionGateway = Depends(get_gateway),
    settings: Settings = Depends(get_app_settings),
):
    """
    Genera un workflow n8n a partir de una descripción.

    Si el modelo no devuelve JSON válido, responde 200 igual con el texto
    crudo, `raw: true` y un `warning`.
    """
    req = _checked_body(req, GenerateWorkflowRequest)
    if is_blank(req.prompt):
        raise ApiError(400, "Prompt is required")

    try:
        result = generate_workflow(gateway, req.prompt, req.context, temperature=settings.temperature)
    except Exception as e:
        logger.exception("Error generating workflow")
        raise ApiError(500, "Failed to generate workflow", str(e)) from e

    if result.raw:
        logger.warning("Model output for generate-workflow is not valid JSON")
        return {"workflow": result.workflow, "warning": RAW_WORKFLOW_WARNING, "raw": True}

    return {"workflow": result.workflow, "prompt": req.prompt, "generated": True}


@router.post("/improve-workflow")
def improve_workflow_endpoint(
    req: Optional[ImproveWorkflowRequest] = Body(default=None),
    gateway: CompletionGateway = Depends(get_gateway),
    settings: Settings = Depends(get_app_settings),
):
    """
    Aplica una mejora al workflow recibido.

    A diferencia de generate, una salida del modelo que no es JSON se
    reporta como 500.
    """
    req = _checked_body(req, ImproveWorkflowRequest)
    if is_blank(req.workflow) or is_blank(req.improvement):
        raise ApiError(400, "Workflow and improvement description are required")

    try:
        improved = improve_workflow(gateway, req.workflow, req.improvement, temperature=settings.temperature)
    except Exception as e:
        logger.exception("Error improving workflow")
        raise ApiError(500, "Failed to improve workflow", str(e)) from e

    return {
        "workflow": improved,
        "original": req.workflow,
        "improvement": req.improvement,
        "success": True,
    }


@router.post("/explain-workflow")
def explain_workflow_endpoint(
    req: Optional[WorkflowRequest] = Body(default=None),
    gateway: CompletionGateway = Depends(get_gateway),
    settings: Settings = Depends(get_app_settings),
):
    """Explica en lenguaje simple qué hace el workflow."""
    req = _checked_body(req, WorkflowRequest)
    if is_blank(req.workflow):
        raise ApiError(400, "Workflow is required")

    try:
        explanation = explain_workflow(gateway, req.workflow, temperature=settings.temperature)
    except Exception as e:
        logger.exception("Error explaining workflow")
        raise ApiError(500, "Failed to explain workflow", str(e)) from e

    return {"explanation": explanation, "workflow": req.workflow, "success": True}


@router.post("/validate-workflow")
def validate_workflow_endpoint(req: Optional[WorkflowRequest] = Body(default=None)):
    """
    Valida la estructura del workflow.

    Siempre responde 200 con `valid` e `issues`; el 500 queda solo para
    errores internos inesperados.
    """
    req = _checked_body(req, WorkflowRequest)
    if is_blank(req.workflow):
        raise ApiError(400, "Workflow is required")

    try:
        result = validate_workflow(req.workflow)
    except Exception as e:
        logger.exception("Error validating workflow")
        raise ApiError(500, "Failed to validate workflow", str(e)) from e

    return {**result.to_dict(), "workflow": req.workflow}
