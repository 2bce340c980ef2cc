"""Command line entry point for locating resources and validating documents."""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from typing import List, Optional

from .exceptions import ResourceResolutionError
from .locator import ResourceLocator, parse_search_order
from .schema import validate_files

LOGGER = logging.getLogger("resource-resolver.local-runner")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Locate resources and validate XML against schemas")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level for the run (DEBUG shows every probe)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    locate = commands.add_parser("locate", help="Find a resource and report where it came from")
    locate.add_argument("resource", help="File path, package resource or URL")
    locate.add_argument(
        "--order",
        default=None,
        help="Comma-separated search order, e.g. remote_url,file_system",
    )
    locate.add_argument("--output", default=None, help="Copy the resource contents to this file")

    check = commands.add_parser("validate", help="Validate an XML file against an XSD")
    check.add_argument("data", help="XML document to validate")
    check.add_argument("schema", help="XSD file; imports are resolved next to it")

    return parser.parse_args(argv)


def _locate(args: argparse.Namespace) -> int:
    locator = ResourceLocator.from_env()
    handle = locator.find(args.resource, parse_search_order(args.order))
    if handle is None:
        print(f"not found: {args.resource}", file=sys.stderr)
        return 1

    with handle:
        if args.output:
            with open(args.output, "wb") as target:
                shutil.copyfileobj(handle.stream, target)
        print(f"{handle.origin.value}\t{handle.location}")
    return 0


def _validate(args: argparse.Namespace) -> int:
    validate_files(args.data, args.schema)
    print(f"valid: {args.data}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    try:
        if args.command == "locate":
            return _locate(args)
        return _validate(args)
    except ResourceResolutionError as exc:
        LOGGER.error("Command failed", extra={"command": args.command})
        print(str(exc), file=sys.stderr)
        for line in getattr(exc, "errors", [])[1:]:
            print(line, file=sys.stderr)
        return 1
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
