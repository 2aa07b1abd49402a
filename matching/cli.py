"""
Command-line interface for best-of-N fuzzy matching.

Usage:
    fuzzy-match -s "Acme & Co Ltd" -l "Acme Corp|Widgets Inc" -c 80 -m tokensortratio

Prints one JSON object to stdout:
    {"match": true, "score": <int>, "index": <int>, "value": "<normalized candidate>"}
    {"match": false, "score": <int>, "index": -1}

Exit codes: 0 match, 1 no match, 2 invalid arguments, 3 unexpected error.
"""

import argparse
import json
import sys
from typing import Optional, Sequence

from config.logging import logger
from config.settings import settings
from matching.exceptions import ExitCode, InvalidArgumentError
from matching.matcher import find_best_match
from matching.scorers import ScoringMethod


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fuzzy-match",
        description="Find the single best fuzzy match for a name in a list of candidates",
    )
    parser.add_argument("-s", "--source", required=True, help="Source name to match")
    parser.add_argument(
        "-l",
        "--list",
        required=True,
        dest="candidates",
        help=f"Candidate names joined by '{settings.LIST_SEPARATOR}'",
    )
    parser.add_argument(
        "-c",
        "--confidence",
        required=True,
        type=int,
        help="Minimum score to accept a match (clamped to 0-100)",
    )
    parser.add_argument(
        "-m",
        "--method",
        required=True,
        help=f"Scoring method: {', '.join(m.value for m in ScoringMethod)}",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the matcher and return the process exit code."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse has already written usage to stderr
        return ExitCode.SUCCESS if e.code == 0 else ExitCode.INVALID_ARGS

    try:
        candidates = args.candidates.split(settings.LIST_SEPARATOR)
        result = find_best_match(
            args.source,
            candidates,
            method=args.method,
            confidence=args.confidence,
            workers=settings.SCORING_WORKERS,
        )
    except InvalidArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return ExitCode.INVALID_ARGS
    except Exception as e:
        logger.debug("Unexpected error during matching", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return ExitCode.RUNTIME_ERROR

    print(json.dumps(result.to_dict()))
    return ExitCode.SUCCESS if result.is_match else ExitCode.NO_MATCH


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
