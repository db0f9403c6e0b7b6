"""Command-line helpers for assembling bundles from directories."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from webbundle_builder.bundle.builder import Builder
from webbundle_builder.bundle.config import build_bundle_from_file
from webbundle_builder.bundle.models import Bundle, Version
from webbundle_builder.bundle.summary import dump_summary, summarize_bundle
from webbundle_builder.errors import WebBundleError

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "inspect":
            bundle = _handle_inspect(args)
        elif args.command == "config":
            bundle = build_bundle_from_file(Path(args.file))
        else:
            parser.error(f"Unknown command '{args.command}'")
            return 1
    except (WebBundleError, ValueError) as exc:
        logger.error("%s", exc)
        _emit({"status": "error", "error": type(exc).__name__, "message": str(exc)})
        return 1

    summary = summarize_bundle(bundle)
    if args.output:
        dump_summary(summary, Path(args.output))
    _emit(summary.model_dump(mode="json"))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="webbundle-builder", description="Assemble bundle exchanges from directories.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect = subparsers.add_parser("inspect", help="Collect a directory and print the bundle summary.")
    inspect.add_argument("--dir", action="append", required=True, help="Directory to collect (repeatable).")
    inspect.add_argument("--base-url", action="append", required=True, help="Base URL per --dir (repeatable).")
    inspect.add_argument("--primary-url", required=True)
    inspect.add_argument("--manifest-url")
    inspect.add_argument("--version", default=Version.VERSION_B2.value, choices=[member.value for member in Version])
    inspect.add_argument("--output", help="Also write the summary JSON to this path.")

    config = subparsers.add_parser("config", help="Assemble a bundle described by a YAML config.")
    config.add_argument("--file", required=True)
    config.add_argument("--output", help="Also write the summary JSON to this path.")

    return parser


def _handle_inspect(args: argparse.Namespace) -> Bundle:
    if len(args.dir) != len(args.base_url):
        raise ValueError("Each --dir needs a matching --base-url.")

    builder = Builder().version(args.version).primary_url(args.primary_url)
    if args.manifest_url:
        builder.manifest(args.manifest_url)
    for directory, base_url in zip(args.dir, args.base_url):
        builder.exchanges_from_dir(Path(directory), base_url)
    return builder.build()


def _emit(payload: dict) -> None:
    sys.stdout.write(json.dumps(payload, indent=2) + "\n")


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
