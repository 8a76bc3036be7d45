#!/usr/bin/env python3
"""
Script de verificación para diagnosticar problemas con la API.

Ejecutar: python tools/check_api.py
"""

import sys
from pathlib import Path

# Agregar raíz del proyecto al path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

print("🔍 Verificando dependencias y estructura de la API...\n")

# 1) Verificar dependencias
print("1. Verificando dependencias:")
try:
    import fastapi
    print(f"   ✅ FastAPI {fastapi.__version__}")
except ImportError as e:
    print(f"   ❌ FastAPI no instalado: {e}")
    sys.exit(1)

try:
    import openai
    print(f"   ✅ OpenAI SDK {openai.__version__}")
except ImportError as e:
    print(f"   ❌ OpenAI SDK no instalado: {e}")
    sys.exit(1)

try:
    import uvicorn
    print(f"   ✅ Uvicorn {uvicorn.__version__}")
except ImportError as e:
    print(f"   ❌ Uvicorn no instalado: {e}")
    sys.exit(1)

# 2) Verificar configuración
print("\n2. Verificando configuración:")
from workflow_copilot.config import get_settings

settings = get_settings()
print(f"   ✅ Puerto: {settings.port}")
print(f"   ✅ Modelo: {settings.openai_model_text}")
if settings.openai_api_key:
    print("   ✅ OPENAI_API_KEY encontrada (no la muestro por seguridad)")
else:
    print("   ⚠️ OPENAI_API_KEY no configurada: generate/improve/explain van a fallar con 500")

# 3) Verificar que se puede crear la app y responder /health y validate
print("\n3. Verificando la app FastAPI:")
try:
    from fastapi.testclient import TestClient

    from api.main import app

    client = TestClient(app)
    health = client.get("/health")
    print(f"   ✅ /health → {health.status_code} {health.json()}")

    sample = {"nodes": [{"type": "n8n-nodes-base.start", "name": "Start"}], "connections": {}}
    resp = client.post("/api/validate-workflow", json={"workflow": sample})
    print(f"   ✅ /api/validate-workflow → {resp.status_code} valid={resp.json().get('valid')}")
except Exception as e:
    print(f"   ❌ Error creando app: {e}")
    import traceback
    traceback.print_exc()
    sys.exit(1)

print("\n✅ Todas las verificaciones pasaron. La API debería funcionar correctamente.")
print("\nPara levantar el servidor:")
print(f"   uvicorn api.main:app --reload --port {settings.port}")
