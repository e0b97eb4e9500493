from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Sequence

from northcheck import __version__
from northcheck.checkers import ReputationChecker
from northcheck.config import Settings, load_settings
from northcheck.errors import CheckError
from northcheck.formatting import render_error, render_json, render_report
from northcheck.models import CheckRequest, FileCheck, UrlCheck
from northcheck.scanner import build_file_request
from northcheck.validation import parse_hash, require_size, validate_size

LOGGER = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="northcheck",
        description="Check links and files for potential threats using NordVPN's public checkers.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Show progress (-v) or request details (-vv) on stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    link = subparsers.add_parser("link", help="Check a URL for potential threats")
    link.add_argument("url", help="URL to check")
    link.add_argument("--json", action="store_true", help="Output raw JSON response")

    file_cmd = subparsers.add_parser("file", help="Check a file for potential threats")
    file_cmd.add_argument("file_path", metavar="filePath", help="Path to the file")
    file_cmd.add_argument("--json", action="store_true", help="Output raw JSON response")
    file_cmd.add_argument(
        "--hash",
        metavar="<sha256>",
        help="Use provided SHA256 hash instead of calculating from file",
    )
    file_cmd.add_argument(
        "--size", metavar="<bytes>", help="File size in bytes (required when using --hash)"
    )
    file_cmd.add_argument(
        "--name", metavar="<filename>", help="File name (optional when using --hash)"
    )

    hash_cmd = subparsers.add_parser("hash", help="Check a SHA256 hash for potential threats")
    hash_cmd.add_argument("sha256", help="SHA256 hash to check")
    hash_cmd.add_argument("--json", action="store_true", help="Output raw JSON response")
    hash_cmd.add_argument("--size", metavar="<bytes>", help="File size in bytes")
    hash_cmd.add_argument("--name", metavar="<filename>", help="File name")

    return parser


def _configure_logging(settings: Settings, verbosity: int) -> None:
    level = settings.log_level
    if verbosity >= 2:
        level = "DEBUG"
    elif verbosity == 1 and logging.getLevelName(level) > logging.INFO:
        level = "INFO"
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _build_checker(settings: Settings) -> ReputationChecker:
    return ReputationChecker(
        link_endpoint=settings.link_endpoint,
        file_endpoint=settings.file_endpoint,
        timeout_seconds=settings.timeout_seconds,
    )


def _build_request(args: argparse.Namespace) -> CheckRequest:
    if args.command == "link":
        LOGGER.info("Checking URL: %s", args.url)
        return UrlCheck(url=args.url)

    if args.command == "hash":
        sha256 = parse_hash(args.sha256, hint="Example: northcheck hash abc123def456...")
        size = validate_size(args.size) if args.size is not None else 0
        request = FileCheck(sha256=sha256, size=size, name=args.name or "unknown")
        LOGGER.info("Checking hash: %s", request.sha256)
        return request

    if args.hash:
        sha256 = parse_hash(
            args.hash,
            hint="Example: northcheck file dummy --hash abc123... --size 1024 --name example.exe",
        )
        size = require_size(args.size)
        request = FileCheck(sha256=sha256, size=size, name=args.name or "unknown")
        LOGGER.info("Checking hash: %s (%s, %d bytes)", sha256, request.name, size)
        return request

    LOGGER.info("Checking file: %s", args.file_path)
    return build_file_request(args.file_path)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    _configure_logging(settings, args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        request = _build_request(args)
        body = asyncio.run(_build_checker(settings).check(request))
    except CheckError as exc:
        LOGGER.debug("Check failed with %s", exc.kind, exc_info=exc)
        print(render_error(exc, show_body=args.json), file=sys.stderr)
        return 1
    except Exception as exc:  # noqa: BLE001
        LOGGER.debug("Unexpected failure", exc_info=exc)
        print(f"Error checking {args.command}: {exc}", file=sys.stderr)
        return 1

    print(render_json(body) if args.json else render_report(body))
    return 0


if __name__ == "__main__":
    sys.exit(main())
