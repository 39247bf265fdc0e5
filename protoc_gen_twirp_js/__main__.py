"""Entry point: protoc-gen-twirp_js, or python -m protoc_gen_twirp_js

Reads a CodeGeneratorRequest from stdin, writes the response to stdout.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import VERSION
from .codegen import generate
from .loader import GeneratorError, load_request, write_response
from .logging import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="protoc-gen-twirp_js",
        description="protoc plugin generating Twirp JavaScript clients.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit.",
    )
    parser.add_argument(
        "--request",
        type=Path,
        default=None,
        help="Read a captured CodeGeneratorRequest from this file instead of stdin.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.version:
        print(VERSION)
        return 0

    logger = configure_logging(verbose=args.verbose)
    try:
        request = load_request(args.request)
    except GeneratorError as exc:
        logger.error("%s", exc)
        return 1

    result = generate(request)
    write_response(result.response)
    return 0


if __name__ == "__main__":
    sys.exit(main())
