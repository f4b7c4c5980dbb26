"""
CLI entry point

    comphub serve [--host H] [--port P]   run the API server
    comphub seed                          reset tasks from the template catalog
    comphub config [--json]               show domains and boards
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from comphub import __version__
from comphub.application.services.task_service import TaskService
from comphub.domain.errors import PersistenceError

load_dotenv(find_dotenv(usecwd=True), override=False)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="comphub",
        description="CompHub - compensation operations task hub",
    )
    subparsers = parser.add_subparsers(dest="command", help="available commands")

    serve_parser = subparsers.add_parser("serve", help="run the API server")
    serve_parser.add_argument("--host", help="bind address (default: COMPHUB_HOST or 0.0.0.0)")
    serve_parser.add_argument("--port", "-p", type=int, help="port (default: COMPHUB_PORT or 3000)")

    subparsers.add_parser("seed", help="reset all tasks from the template catalog")

    config_parser = subparsers.add_parser("config", help="show domains and boards")
    config_parser.add_argument("--json", action="store_true", help="print the full JSON summary")

    parser.add_argument("--version", "-v", action="store_true", help="show version")
    return parser


def _print_config(summary: dict) -> None:
    domains = summary["domains"]
    print(f"{'BOARD':<22} {'DOMAIN':<26} {'CADENCE':<12} TASKS")
    print("-" * 68)
    for board in summary["boards"]:
        domain = domains.get(board["domain"], {}).get("name", board["domain"])
        print(f"{board['id']:<22} {domain:<26} {board['cadence']:<12} {board['taskCount']}")
    print(f"\n{len(summary['boards'])} boards, {summary['totalTemplates']} templates")


def run_cli(args: Optional[list] = None) -> int:
    parser = create_parser()
    parsed = parser.parse_args(args)

    if parsed.version:
        print(f"CompHub v{__version__}")
        return 0

    if not parsed.command:
        parser.print_help()
        return 0

    if parsed.command == "serve":
        from comphub.api.main import serve

        serve(host=parsed.host, port=parsed.port)
        return 0

    service = TaskService.from_settings()

    if parsed.command == "config":
        summary = service.get_config()
        if parsed.json:
            print(json.dumps(summary, indent=2, ensure_ascii=False))
        else:
            _print_config(summary)
        return 0

    if parsed.command == "seed":
        try:
            result = service.reset()
        except PersistenceError as exc:
            print(f"Seeding failed: {exc}", file=sys.stderr)
            return 1
        print(result["message"])
        return 0

    parser.print_help()
    return 1


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
