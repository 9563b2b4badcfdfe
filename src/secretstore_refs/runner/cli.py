"""Command-line interface for resolving secret references."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from secretstore_refs.core.config.base import LogLevel
from secretstore_refs.core.config.behaviour import (
    should_expose_config_parameters,
    should_expose_env_parameters,
)
from secretstore_refs.core.config.loader import load_from_file
from secretstore_refs.core.config.references import ResolutionRequest
from secretstore_refs.core.references.exceptions import UnresolvedReferenceError
from secretstore_refs.core.references.injection import resolve_parameters
from secretstore_refs.core.references.scanner import scan

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="secretstore-refs",
        description="Resolve secret-store references in parameters from a HOCON request file.",
    )
    parser.add_argument(
        "request",
        help="Path to the HOCON resolution request (parameters, secrets, references).",
    )
    parser.add_argument(
        "--scan-only",
        action="store_true",
        default=False,
        help="Only list referenced secret keys and the parameters using them.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=False,
        help="Fail when a secret reference cannot be resolved.",
    )
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        default=LogLevel.INFO.value,
        help="Set the logging level (default: INFO).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for resolving secret references.

    Args:
        argv: Command-line arguments. Defaults to ``sys.argv[1:]``.

    Returns:
        Exit code: 0 for success, 1 for failure.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        request = load_from_file(args.request, ResolutionRequest)
    except Exception as exc:
        logger.error("Failed to load resolution request: %s", exc)
        return 1

    if args.scan_only:
        result = scan(request.parameters, request.references)
        print(
            json.dumps(
                {
                    "references": sorted(result.references),
                    "keys_with_references": sorted(result.keys_with_references),
                },
                indent=2,
            )
        )
        return 0

    try:
        report = resolve_parameters(
            request.parameters,
            request.secrets,
            request.references,
            strict=args.strict,
        )
    except UnresolvedReferenceError as exc:
        logger.error("%s", exc)
        return 1

    output = {
        "resolved": report.resolved,
        "unresolved": report.unresolved,
        "expose": {
            "env": should_expose_env_parameters(request.parameters),
            "config": should_expose_config_parameters(request.parameters),
        },
    }
    print(json.dumps(output, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
