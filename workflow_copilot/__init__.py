"""
Core del copiloto de workflows n8n.

- `validator`: validación estructural (pura, sin IO)
- `engine`: generar / mejorar / explicar workflows vía un `CompletionGateway`
- `llm_client`: gateway concreto sobre OpenAI
"""

__version__ = "0.1.0"
