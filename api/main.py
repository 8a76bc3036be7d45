"""
API HTTP principal del copiloto de workflows n8n.

Esta aplicación FastAPI expone endpoints REST que usan el core interno
(workflow_copilot.engine / workflow_copilot.validator).

Uso:
    uvicorn api.main:app --reload --port 3001
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from workflow_copilot import __version__
from workflow_copilot.config import Settings, get_settings
from workflow_copilot.core.abstractions import CompletionGateway
from workflow_copilot.errors import INVALID_BODY_ERROR, ApiError
from workflow_copilot.llm_client import OpenAICompletionGateway

from .routes import health, workflows

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    log_level = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    return JSONResponse(
        status_code=400,
        content={"error": INVALID_BODY_ERROR, "message": details},
    )


def create_app(
    settings: Optional[Settings] = None,
    gateway: Optional[CompletionGateway] = None,
) -> FastAPI:
    """
    Construye la app FastAPI.

    Args:
        settings: Configuración resuelta. Por defecto `get_settings()`.
        gateway: Proveedor de completions. Por defecto OpenAI con `settings`.

    Returns:
        FastAPI lista para servir (o para `TestClient`).
    """
    settings = settings or get_settings()
    gateway = gateway or OpenAICompletionGateway(settings)

    app = FastAPI(
        title="N8N AI Copilot Service",
        description="Genera, mejora, explica y valida workflows de n8n con un LLM",
        version=__version__,
    )
    app.state.settings = settings
    app.state.gateway = gateway

    logger.info(f"🌐 CORS origins configurados: {settings.cors_origins}")

    # CORS: sin credenciales cuando se permite cualquier origen
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Registrar rutas
    app.include_router(health.router)
    app.include_router(workflows.router)

    return app


_settings = get_settings()
configure_logging(_settings)
logger.info(f"🚀 Iniciando {_settings.service_name} en puerto {_settings.port}")

app = create_app(_settings)
