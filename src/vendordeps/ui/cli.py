# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from vendordeps.app import build_dependency_view
from vendordeps.config import (
    CatalogConfig,
    ConfigurationError,
    configure_logging,
    get_catalog_config,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from vendordeps.domain.model import ReconciliationResult

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compare installed vendor libraries with the published catalog"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Show update candidates for a workspace")
    check.add_argument(
        "workspace",
        nargs="?",
        default=".",
        help="Project directory (default: current directory)",
    )
    check.add_argument(
        "--year",
        type=int,
        help="Catalog year (overrides the project year and VENDORDEPS_YEAR)",
    )
    check.add_argument(
        "--url-template",
        type=str,
        help="Catalog URL template with a {year} placeholder",
    )
    check.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    check.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(list(argv))


def _build_config(args: argparse.Namespace) -> CatalogConfig:
    config = get_catalog_config()
    if args.url_template:
        config = replace(config, url_template=args.url_template)
    if args.year is not None:
        if args.year <= 0:
            raise ValueError("Year must be positive")
        config = replace(config, default_year=args.year)
    return config


def result_to_dict(result: ReconciliationResult) -> dict[str, object]:
    return {
        "installed": [
            {
                "uuid": item.identity,
                "name": item.name,
                "currentVersion": item.current_version,
                "versionInfo": [
                    {"version": candidate.version, "buttonText": str(candidate.action)}
                    for candidate in item.candidates
                ],
            }
            for item in result.installed
        ],
        "available": [
            {
                "path": entry.path,
                "name": entry.name,
                "version": entry.version,
                "uuid": entry.identity,
                "description": entry.description,
                "website": entry.website,
            }
            for entry in result.available
        ],
        "catalogError": str(result.catalog_error) if result.catalog_error else None,
    }


def render_text(result: ReconciliationResult) -> str:
    lines = ["Installed vendor dependencies:"]
    if not result.installed:
        lines.append("  (none)")
    for item in result.installed:
        lines.append(f"  {item.name} {item.current_version}")
        for candidate in item.candidates:
            lines.append(f"    {candidate.version:<20} {candidate.action}")
    lines.append("")
    lines.append("Available dependencies:")
    if not result.catalog_available:
        lines.append(f"  (catalog unavailable: {result.catalog_error})")
    elif not result.available:
        lines.append("  (none)")
    for entry in result.available:
        lines.append(f"  {entry.name} {entry.version} - {entry.description}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
        config = _build_config(parsed_args)
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        service = build_dependency_view(config=config, year=parsed_args.year)
        result = service.refresh(Path(parsed_args.workspace))
    except Exception:
        log.exception("Fatal error during refresh")
        sys.exit(1)

    if result is None:
        log.error("No workspace at %s", parsed_args.workspace)
        sys.exit(1)

    if parsed_args.json:
        print(json.dumps(result_to_dict(result), indent=2))
    else:
        print(render_text(result))


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
