"""
workflow_copilot.cli
====================

Punto de entrada mínimo para usar el copiloto sin levantar la API:

- `validate ARCHIVO`  valida un workflow JSON local (no usa la red).
- `explain ARCHIVO`   pide al modelo una explicación del workflow.
- `generate PROMPT`   genera un workflow desde una descripción.

Pensado para smoke tests manuales y para chequear workflows en CI
(`validate` sale con código 1 si hay issues).
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from .config import get_settings
from .engine import explain_workflow, generate_workflow
from .llm_client import OpenAICompletionGateway
from .validator import validate_workflow


def _load_workflow(path: str) -> Any:
    workflow_path = Path(path)
    if not workflow_path.exists():
        raise FileNotFoundError(f"No se encontró el workflow: {workflow_path}")
    return json.loads(workflow_path.read_text(encoding="utf-8"))


def _cmd_validate(args: argparse.Namespace) -> int:
    result = validate_workflow(_load_workflow(args.file))
    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0 if result.valid else 1


def _cmd_explain(args: argparse.Namespace) -> int:
    settings = get_settings()
    gateway = OpenAICompletionGateway(settings)
    print(explain_workflow(gateway, _load_workflow(args.file), temperature=settings.temperature))
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    settings = get_settings()
    gateway = OpenAICompletionGateway(settings)
    result = generate_workflow(gateway, args.prompt, args.context, temperature=settings.temperature)
    if result.raw:
        print("⚠️ Generated content may not be valid JSON", file=sys.stderr)
        print(result.workflow)
    else:
        print(json.dumps(result.workflow, indent=2, ensure_ascii=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="workflow-copilot", description="Copiloto de workflows n8n")
    sub = parser.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Valida la estructura de un workflow JSON")
    p_validate.add_argument("file")
    p_validate.set_defaults(func=_cmd_validate)

    p_explain = sub.add_parser("explain", help="Explica un workflow JSON")
    p_explain.add_argument("file")
    p_explain.set_defaults(func=_cmd_explain)

    p_generate = sub.add_parser("generate", help="Genera un workflow desde una descripción")
    p_generate.add_argument("prompt")
    p_generate.add_argument("--context", default=None)
    p_generate.set_defaults(func=_cmd_generate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
