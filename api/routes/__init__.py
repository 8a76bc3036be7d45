"""Rutas de la API."""

from . import health, workflows

__all__ = ["health", "workflows"]
