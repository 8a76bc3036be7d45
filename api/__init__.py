"""
API HTTP del copiloto de workflows n8n.

Esta capa expone endpoints REST que usan el core interno (workflow_copilot)
para generar, mejorar, explicar y validar workflows.

La API está diseñada para ser consumida por:
- el editor de n8n (extensión del copiloto)
- Clientes externos
- Scripts de automatización
"""
