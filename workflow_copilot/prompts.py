# workflow_copilot/prompts.py

"""
Prompts e instrucciones para generar, mejorar y explicar workflows de n8n.
"""

import json
from typing import Any, List, Optional

from .domain_models import ChatMessage

GENERATE_WORKFLOW_SYSTEM = """You are an AI assistant specialized in generating N8N workflow configurations.
Your task is to convert natural language descriptions into valid N8N workflow JSON.
Generate a complete workflow structure with nodes, connections, and settings.
Ensure all node types are valid N8N node types.
Include proper node positioning for visual layout.
Return ONLY valid JSON without any markdown formatting or additional text."""

IMPROVE_WORKFLOW_SYSTEM = """You are an AI assistant specialized in optimizing N8N workflows.
Analyze the provided workflow and suggest improvements based on the user's request.
Return a modified workflow JSON with the improvements applied.
Ensure the workflow remains valid and functional.
Return ONLY valid JSON without any markdown formatting or additional text."""

EXPLAIN_WORKFLOW_SYSTEM = """You are an AI assistant that explains N8N workflows in clear, simple language.
Analyze the workflow structure and provide a human-readable explanation of what it does.
Explain each major step and how the nodes work together."""


def dump_workflow(workflow: Any) -> str:
    """Serializa el workflow como JSON compacto para incrustarlo en el prompt."""
    return json.dumps(workflow, separators=(",", ":"), ensure_ascii=False)


def _messages(system: str, user: str) -> List[ChatMessage]:
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": user},
    ]


def build_generate_messages(prompt: str, context: Optional[str] = None) -> List[ChatMessage]:
    user = f"Generate an N8N workflow for: {prompt}"
    if context:
        user += f"\n\nAdditional context: {context}"
    return _messages(GENERATE_WORKFLOW_SYSTEM, user)


def build_improve_messages(workflow: Any, improvement: str) -> List[ChatMessage]:
    user = f"Current workflow: {dump_workflow(workflow)}\n\nImprovement request: {improvement}"
    return _messages(IMPROVE_WORKFLOW_SYSTEM, user)


def build_explain_messages(workflow: Any) -> List[ChatMessage]:
    return _messages(EXPLAIN_WORKFLOW_SYSTEM, f"Explain this N8N workflow: {dump_workflow(workflow)}")
