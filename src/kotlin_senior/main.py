"""
CLI entry point for kotlin-senior.

Subcommands: serve (default), list-tools, call.
serve runs the MCP server on stdio; list-tools prints the discovery payload;
call invokes a single tool locally and prints its response envelope.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import List, Optional

import structlog

from kotlin_senior.config.settings import Settings, get_settings, reload_settings
from kotlin_senior.dispatch.envelope import build_envelope, build_error_envelope
from kotlin_senior.dispatch.errors import ToolError
from kotlin_senior.dispatch.invoker import ToolInvoker
from kotlin_senior.server import build_server, run_stdio
from kotlin_senior.tools import get_default_registry
from kotlin_senior.utils.logging import configure_logging

logger = structlog.get_logger(__name__)


def _cmd_serve(settings: Settings) -> int:
    """Register the catalog, attach to stdio, and serve until the client disconnects."""
    try:
        invoker = ToolInvoker(get_default_registry())
        server = build_server(invoker, settings.server)
        asyncio.run(run_stdio(server))
        return 0
    except KeyboardInterrupt:
        logger.info("server_interrupted")
        return 0
    except Exception as e:
        logger.exception("server_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _cmd_list_tools() -> int:
    """Print the discovery payload as JSON."""
    invoker = ToolInvoker(get_default_registry())
    payload = {"tools": [d.to_dict() for d in invoker.list_tools()]}
    print(json.dumps(payload, indent=2))
    return 0


def _cmd_call(name: str, raw_arguments: Optional[str]) -> int:
    """Invoke one tool and print its envelope. Returns 1 on a tool error, 2 on bad JSON."""
    arguments = None
    if raw_arguments is not None:
        try:
            arguments = json.loads(raw_arguments)
        except json.JSONDecodeError as e:
            print(f"Error: --arguments is not valid JSON: {e}", file=sys.stderr)
            return 2
    invoker = ToolInvoker(get_default_registry())
    try:
        result = invoker.invoke(name, arguments)
    except ToolError as e:
        print(json.dumps(build_error_envelope(e), indent=2))
        return 1
    print(json.dumps(build_envelope(result), indent=2))
    return 0


def _load_settings(config_path: Optional[str]) -> Settings:
    if config_path:
        return reload_settings(config_path)
    return get_settings()


def main(argv: Optional[List[str]] = None) -> int:
    """Parse CLI args and dispatch to subcommands. Returns the process exit status."""
    parser = argparse.ArgumentParser(
        description="kotlin-senior: MCP tool server with senior Kotlin advice (serve, list-tools, or call).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML settings file (keys: server, logging). Default: environment and .env.",
    )
    subparsers = parser.add_subparsers(dest="command", required=False)

    subparsers.add_parser("serve", help="Run the MCP server on stdio (default).")
    subparsers.add_parser("list-tools", help="Print the registered tools as JSON.")

    call_p = subparsers.add_parser("call", help="Invoke one tool locally and print the response.")
    call_p.add_argument("name", help="Tool name (e.g. analyze_architecture).")
    call_p.add_argument(
        "--arguments",
        default=None,
        help='Tool arguments as a JSON object (e.g. \'{"codeSnippet": "val x = y!!"}\').',
    )

    args = parser.parse_args(argv)

    try:
        settings = _load_settings(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1
    configure_logging(settings.logging)

    command = args.command or "serve"
    if command == "serve":
        return _cmd_serve(settings)
    if command == "list-tools":
        return _cmd_list_tools()
    if command == "call":
        return _cmd_call(args.name, args.arguments)
    return 1


if __name__ == "__main__":
    sys.exit(main())
