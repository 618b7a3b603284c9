"""Command-line entry point for applying LLM suggestions to a document.

Usage:
  python -m proofpatch essay.txt --suggestions response.txt
  python -m proofpatch essay.txt --suggestions response.json --json -o result.json

The suggestions file may hold the raw model response (code fences and
commentary are tolerated) or a plain JSON array of suggestion objects.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from proofpatch.config import LOG_LEVELS, CorrectionSettings, load_settings
from proofpatch.llm import SuggestionParseError, parse_suggestions
from proofpatch.models import OverlapPolicy
from proofpatch.pipeline import correct_text


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Apply AI grammar suggestions to a text document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("document", type=Path, help="Path to the text that was checked")
    parser.add_argument(
        "--suggestions",
        type=Path,
        required=True,
        help="Path to the model response or JSON suggestion list",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the result here instead of stdout",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the full check response (suggestions, corrected_text, score) as JSON",
    )
    parser.add_argument(
        "--overlap-policy",
        choices=OverlapPolicy.all_values(),
        help="Resolve overlapping suggestions (default: PROOFPATCH_OVERLAP_POLICY or none)",
    )
    parser.add_argument(
        "--no-require-match",
        action="store_true",
        help="Keep suggestions whose original text does not match the document",
    )
    parser.add_argument(
        "--no-sanitize",
        action="store_true",
        help="Use the document exactly as read (offsets must refer to the raw text)",
    )
    parser.add_argument(
        "--dotenv",
        type=Path,
        help="Path to a .env file with PROOFPATCH_* settings",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Logging level (default: PROOFPATCH_LOG_LEVEL or WARNING)",
    )

    return parser.parse_args(args)


def _build_settings(parsed_args: argparse.Namespace) -> CorrectionSettings:
    settings = load_settings(parsed_args.dotenv)
    if parsed_args.overlap_policy:
        settings = replace(settings, overlap_policy=OverlapPolicy(parsed_args.overlap_policy))
    if parsed_args.no_require_match:
        settings = replace(settings, require_match=False)
    if parsed_args.log_level:
        settings = replace(settings, log_level=parsed_args.log_level)
    return settings


def main(args: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for bad input, 2 for an unparsable response)
    """
    parsed_args = parse_args(args)

    try:
        settings = _build_settings(parsed_args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(level=settings.log_level)

    for path in (parsed_args.document, parsed_args.suggestions):
        if not path.exists():
            print(f"Error: File not found: {path}", file=sys.stderr)
            return 1

    try:
        text = parsed_args.document.read_text(encoding="utf-8")
        response_text = parsed_args.suggestions.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Could not read input: {e}", file=sys.stderr)
        return 1

    # Parse up front so a broken response is reported rather than silently ignored
    try:
        edits = parse_suggestions(response_text, max_message_length=settings.max_message_length)
    except SuggestionParseError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 2

    result = correct_text(
        text,
        edits,
        settings=settings,
        sanitize=not parsed_args.no_sanitize,
    )

    if parsed_args.json:
        output = json.dumps(result.to_response(), indent=2, ensure_ascii=False) + "\n"
    else:
        output = result.corrected_text

    if parsed_args.output:
        parsed_args.output.parent.mkdir(parents=True, exist_ok=True)
        parsed_args.output.write_text(output, encoding="utf-8")
        print(
            f"Applied {len(result.applied)} suggestion(s) -> {parsed_args.output}",
            file=sys.stderr,
        )
    else:
        sys.stdout.write(output)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
