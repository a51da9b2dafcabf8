"""CLI entry point: python -m processing {use_case} --params '{...}'

Runs one Escavador lookup with the process environment as configuration
and prints the result envelope as JSON on stdout. Logs go to stderr.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys

from processing.sinks import JsonStdoutSink
from processing.usecases import USE_CASE_REGISTRY

logger = logging.getLogger("processing")

VALID_USE_CASES = list(USE_CASE_REGISTRY.keys())


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m processing",
        description="Escavador lookups — fetch and normalize judicial proceedings.",
    )
    parser.add_argument(
        "use_case",
        choices=VALID_USE_CASES,
        help="Lookup to run (processo, advogado or movimentacoes).",
    )
    parser.add_argument(
        "--params",
        type=json.loads,
        default={},
        help='Lookup parameters as JSON, e.g. \'{"numeroProcesso": "..."}\' (default: {}).',
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    use_case = USE_CASE_REGISTRY[args.use_case](env=os.environ, sink=JsonStdoutSink())
    logger.debug("Running %s", args.use_case)
    result = asyncio.run(use_case.run(args.params))
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
