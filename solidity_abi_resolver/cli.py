"""Command line interface for solidity_abi_resolver."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .core.models import AbiFormatError, load_abi
from .generator.interface import GeneratorError, WriterOptions, describe_interface
from .services.resolver import ResolutionError, create_service
from .sources import SOURCE_REGISTRY
from .sources.abi_source import declared_name_from_path

DEFAULT_OPTIONS = WriterOptions()


class CommandError(RuntimeError):
    """Raised when a command cannot complete."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render contract ABI JSON as Solidity interfaces.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    describe_parser = subparsers.add_parser(
        "describe",
        help="Print the Solidity interface for an ABI JSON file.",
    )
    describe_parser.add_argument("path", help="Path to a .json or .abi.json file.")
    describe_parser.add_argument(
        "--name",
        help="Interface name (default: derived from the file name).",
    )
    describe_parser.add_argument(
        "--render-events",
        action="store_true",
        help="Include event declarations in the interface.",
    )
    describe_parser.add_argument(
        "--pragma",
        default=DEFAULT_OPTIONS.pragma,
        help=f"Solidity version range (default: {DEFAULT_OPTIONS.pragma}).",
    )
    describe_parser.add_argument(
        "--license",
        dest="license_identifier",
        default=DEFAULT_OPTIONS.license_identifier,
        help="SPDX license identifier for the header.",
    )

    resolve_parser = subparsers.add_parser(
        "resolve", help="Resolve an import path through the source chain."
    )
    resolve_parser.add_argument("import_path", help="Import path as written in source.")
    resolve_parser.add_argument(
        "--from",
        dest="imported_from",
        default="",
        help="File containing the import statement.",
    )
    resolve_parser.add_argument(
        "--sources",
        help=(
            "Comma separated source names, tried in order "
            f"(default: {','.join(SOURCE_REGISTRY.names())})."
        ),
    )
    resolve_parser.add_argument(
        "--cwd",
        dest="working_directory",
        help="Directory relative imports are resolved against.",
    )

    subparsers.add_parser("sources", help="List registered import sources in chain order.")

    return parser


def _configure_logging(verbose: bool) -> None:
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )


def handle_describe(args: argparse.Namespace) -> str:
    path = Path(args.path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CommandError(f"Cannot read {path}: {exc}") from exc

    options = WriterOptions(
        license_identifier=args.license_identifier,
        pragma=args.pragma,
        render_events=args.render_events,
    )
    name = args.name or declared_name_from_path(str(path))
    try:
        return describe_interface(name, load_abi(text), options)
    except (AbiFormatError, GeneratorError) as exc:
        raise CommandError(f"{path}: {exc}") from exc


def handle_resolve(args: argparse.Namespace) -> Dict[str, Any]:
    source_names = None
    if args.sources:
        source_names = [name.strip() for name in args.sources.split(",") if name.strip()]
    service = create_service(args.working_directory, source_names=source_names)
    resolved = asyncio.run(service.resolve(args.import_path, args.imported_from))
    return resolved.as_dict()


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        if args.command == "describe":
            print(handle_describe(args))
            return 0
        if args.command == "sources":
            print(SOURCE_REGISTRY.summary())
            return 0
        if args.command == "resolve":
            result = handle_resolve(args)
        else:  # pragma: no cover - defensive
            parser.error(f"Unknown command {args.command}")
            return 2
    except (CommandError, ResolutionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    json.dump(result, sys.stdout, indent=2, ensure_ascii=False)
    print()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
