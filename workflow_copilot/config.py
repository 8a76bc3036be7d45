# workflow_copilot/config.py
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List
import os

from dotenv import load_dotenv

"""
workflow_copilot.config
=======================

Gestión centralizada de configuración del servicio.

Este módulo define:
- La estructura de configuración (`Settings`)
- El mecanismo para cargar variables desde entorno (.env)
- Un acceso único y cacheado a la configuración (`get_settings`)

Objetivos de diseño
-------------------
1. **Fuente única de verdad**
   La configuración se resuelve una sola vez al arrancar y se pasa
   explícitamente a `api.main.create_app()`. Ni el validador ni los handlers
   leen el entorno por su cuenta.

2. **Facilidad de testing**
   Los tests construyen `Settings(...)` a mano y no tocan el entorno.

Notas importantes
-----------------
- `load_dotenv()` se ejecuta al importar el módulo.
- Si `OPENAI_API_KEY` no está presente, el error se lanza recién cuando
  alguien intenta llamar al modelo (ver `llm_client`), no acá.
"""

# Cargar variables de entorno desde .env (si existe)
load_dotenv()


DEFAULT_SERVICE_NAME = "N8N AI Copilot Service"


@dataclass
class Settings:
    """
    Contenedor tipado de configuración del servicio.

    Attributes
    ----------
    openai_api_key:
        API key de OpenAI. Vacía significa "no configurada".
    openai_model_text:
        Modelo de chat usado para generar, mejorar y explicar workflows.
    temperature:
        Temperatura de muestreo para todas las llamadas al modelo.
    port:
        Puerto HTTP en el que escucha `run_api.py`.
    cors_origins:
        Orígenes permitidos por CORS. `["*"]` habilita cualquiera.
    log_level:
        Nivel de logging (nombre del nivel de `logging`).
    service_name:
        Nombre que devuelve `/health`.
    """

    # OpenAI
    openai_api_key: str = ""
    openai_model_text: str = "gpt-4"
    temperature: float = 0.7

    # HTTP
    port: int = 3001
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    # Observabilidad
    log_level: str = "INFO"
    service_name: str = DEFAULT_SERVICE_NAME


def _parse_origins(raw: str) -> List[str]:
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


@lru_cache
def get_settings() -> Settings:
    """
    Devuelve una instancia única y cacheada de `Settings`.

    Variables de entorno utilizadas
    -------------------------------
    - OPENAI_API_KEY
    - OPENAI_MODEL_TEXT (default: "gpt-4")
    - OPENAI_TEMPERATURE (default: 0.7)
    - PORT (default: 3001)
    - CORS_ORIGINS (default: "*", lista separada por comas)
    - LOG_LEVEL (default: "INFO")
    - SERVICE_NAME (default: "N8N AI Copilot Service")

    Raises
    ------
    ValueError
        Si `PORT` u `OPENAI_TEMPERATURE` no son numéricos.
    """
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY", ""),
        openai_model_text=os.getenv("OPENAI_MODEL_TEXT", "gpt-4"),
        temperature=float(os.getenv("OPENAI_TEMPERATURE", "0.7")),
        port=int(os.getenv("PORT", "3001")),
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS", "*")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        service_name=os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME),
    )
