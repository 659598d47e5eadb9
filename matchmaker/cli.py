#!/usr/bin/env python3
"""
Monster Matchmaker command line.

Usage:
  monster-matchmaker '{"timeOfDay":"night","weather":"stormy","conflictStyle":"direct","snackFlavor":"salty","ambition":"power"}'
  echo '{"timeOfDay":"dawn",...}' | monster-matchmaker
  echo '{"timeOfDay":"dawn",...}' | monster-matchmaker -

Exit codes:
  0 = persona assigned (JSON on stdout)
  1 = bad input or pipeline failure (error JSON)
"""

import argparse
import json
import sys
from typing import Any, Optional, Sequence

from matchmaker.core.config import settings
from matchmaker.core.logging import configure_logging
from matchmaker.features.personas.pipeline import process_pipeline


def run(raw_input: Any) -> tuple[bool, str]:
    """Run the pipeline and return (succeeded, JSON text)."""
    result = process_pipeline(raw_input, max_words=settings.RATIONALE_MAX_WORDS)
    if result.success:
        return True, result.value
    return False, json.dumps({"error": result.error})


def main(raw_input: Any) -> str:
    """Pipeline output, or {"error": "..."} JSON on failure."""
    return run(raw_input)[1]


def _read_input(arg: Optional[str]) -> Optional[str]:
    if arg is not None and arg != "-":
        return arg
    if arg == "-" or not sys.stdin.isatty():
        data = sys.stdin.read()
        return data if data.strip() else None
    return None


def cli(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="monster-matchmaker",
        description="Assign a monster persona from five quiz answers",
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="JSON object with timeOfDay, weather, conflictStyle, snackFlavor, ambition ('-' reads stdin)",
    )
    args = parser.parse_args(argv)
    configure_logging(settings.ENV, settings.LOG_LEVEL, stream=sys.stderr)

    text = _read_input(args.input)
    if text is None:
        parser.print_usage(sys.stderr)
        print("error: no JSON input given", file=sys.stderr)
        return 1

    try:
        raw_input = json.loads(text)
    except json.JSONDecodeError as e:
        print(json.dumps({"error": f"Failed to process input: {e}"}), file=sys.stderr)
        return 1

    succeeded, output = run(raw_input)
    print(output)
    return 0 if succeeded else 1


if __name__ == "__main__":
    sys.exit(cli())
