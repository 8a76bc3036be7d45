"""
Dependencias de FastAPI.

La configuración y el gateway del LLM se construyen una sola vez en
`api.main.create_app()` y quedan en `app.state`; las rutas los obtienen
por acá. En tests se reemplazan con `app.dependency_overrides`.
"""

from fastapi import Request

from workflow_copilot.config import Settings
from workflow_copilot.core.abstractions import CompletionGateway


def get_app_settings(request: Request) -> Settings:
    """Devuelve la configuración con la que se creó la app."""
    return request.app.state.settings


def get_gateway(request: Request) -> CompletionGateway:
    """Devuelve el gateway de completions inyectado en la app."""
    return request.app.state.gateway
