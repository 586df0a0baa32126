from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import DEFAULT_CONFIG_PATH, Settings, SourceConfig, load_settings
from ..errors import ConfigError, ToggleError
from ..logging.init import set_debug, setup_logging
from ..services.request import ToggleRequest
from ..services.toggles import get_toggles
from ..sheets.factory import make_source

"""CLI entrypoint.

    sheet-toggles resolve --sheet <id> --toggles dark_mode,beta_banner
    sheet-toggles resolve --file toggles.xlsx --toggles dark_mode
    sheet-toggles serve --port 8080

``resolve`` prints the JSON result on stdout; logs go through the labeled
logger.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1


def _load_env_file(path: Path) -> None:
    """Load .env without overriding variables already set in the process."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=False)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="sheet-toggles", description="Feature toggles served from a spreadsheet")
    p.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Settings YAML file")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    r = sub.add_parser("resolve", help="Resolve toggles once and print JSON")
    r.add_argument("--toggles", required=True, help="Comma separated toggle names")
    src = r.add_mutually_exclusive_group()
    src.add_argument("--sheet", help="Google Sheets document id")
    src.add_argument("--file", type=Path, help="Local .xlsx/.csv sheet (overrides configured source)")

    s = sub.add_parser("serve", help="Run the HTTP server")
    s.add_argument("--port", type=int, help="Port (overrides config and PORT)")
    return p.parse_args(argv)


def _resolve(args: argparse.Namespace, settings: Settings) -> int:
    if args.file is not None:
        settings = replace(settings, source=SourceConfig(type="file", path=str(args.file)))

    # a file source is its own sheet; its name stands in for the document id
    if settings.source.type == "file" and settings.source.path:
        sheet_id = Path(settings.source.path).name
    else:
        sheet_id = args.sheet or ""

    source = make_source(settings)
    response = get_toggles(ToggleRequest(sheet_id=sheet_id, names=tuple(args.toggles.split(","))), source)
    print(json.dumps(response.body, indent=2))
    return EXIT_SUCCESS if response.ok else EXIT_FATAL


def _serve(args: argparse.Namespace, settings: Settings) -> int:  # pragma: no cover (blocking)
    from ..http.app import serve

    if args.port is not None:
        settings = replace(settings, server=replace(settings.server, port=args.port))
    serve(settings)
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None -> read sys.argv; an explicit [] from tests must not pick up pytest's own argv
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    if args.debug:
        set_debug()

    try:
        settings = load_settings(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    try:
        if args.command == "serve":
            return _serve(args, settings)
        return _resolve(args, settings)
    except ToggleError as e:
        logger.error(e.describe())
        return EXIT_FATAL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
