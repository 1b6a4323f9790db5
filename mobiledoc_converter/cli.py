"""Command-line interface for the Mobiledoc → Lexical converter.

WHY: Migrations run over exported post bodies on disk or piped through a
shell. The CLI wraps convert() so a file (or stdin) goes in and Lexical
JSON comes out, without writing any Python.

HOW: argparse accepts zero or more input paths. With no inputs (or "-")
the Mobiledoc is read from stdin. Each result is printed to stdout, or
saved as {stem}.lexical.json under --output-dir. Conversion settings map
onto ConversionOptions. Status messages go to stderr.

RULES:
- No inputs or "-" → read stdin
- --output-dir: save {stem}.lexical.json, numeric suffix on conflict
  (post.lexical-2.json); without it, print to stdout
- Exit code 1 if any input is missing, unreadable or fails to convert; the remaining
  inputs are still processed
- -v enables DEBUG logging on stderr
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import jsonschema

from mobiledoc_converter.config import (
    DEFAULT_ROOT_DIRECTION,
    DEFAULT_STRICT_NESTING,
    DEFAULT_VALIDATE_OUTPUT,
    ROOT_DIRECTION_RULES,
)
from mobiledoc_converter.core.converter import ConversionOptions, convert
from mobiledoc_converter.exceptions import ConversionError

OUTPUT_SUFFIX = ".lexical.json"
STDIN_NAME = "-"


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _resolve_output_path(stem: str, suffix: str, output_dir: Path) -> Path:
    """Resolve the output file path, adding a numeric suffix on conflict.

    WHY: Re-running a migration must not overwrite earlier output.

    RULES:
    - First attempt: {stem}{suffix} (e.g. post.lexical.json)
    - Conflict: counter inserted before the last extension
      (e.g. post.lexical-2.json), starting at 2
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _read_input(name: str) -> str:
    if name == STDIN_NAME:
        return sys.stdin.read()
    return Path(name).read_text(encoding="utf-8")


def _convert_one(
    name: str,
    options: ConversionOptions,
    indent: Optional[int],
    output_dir: Optional[Path],
) -> bool:
    """Convert one input and emit it. Returns False on failure."""
    if name != STDIN_NAME and not Path(name).is_file():
        print("Error: File not found: {}".format(name), file=sys.stderr)
        return False

    try:
        serialized = _read_input(name)
    except (OSError, UnicodeDecodeError) as e:
        print("Error: Cannot read {}: {}".format(name, e), file=sys.stderr)
        return False

    try:
        state = convert(serialized, options)
    except (ConversionError, jsonschema.ValidationError) as e:
        print("Error: {}: {}".format(name, e), file=sys.stderr)
        return False

    if indent is None:
        content = json.dumps(state, ensure_ascii=False, separators=(",", ":"))
    else:
        content = json.dumps(state, ensure_ascii=False, indent=indent)

    if output_dir is None:
        sys.stdout.write(content + "\n")
        return True

    stem = "stdin" if name == STDIN_NAME else Path(name).name.split(".")[0]
    path = _resolve_output_path(stem, OUTPUT_SUFFIX, output_dir)
    path.write_text(content + "\n", encoding="utf-8")
    _status("  Saved: {}".format(path.name))
    return True


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="mobiledoc-to-lexical",
        description="Convert Mobiledoc documents into Lexical editor state JSON.",
    )

    parser.add_argument(
        "inputs",
        nargs="*",
        help="Mobiledoc JSON files to convert. Reads stdin when omitted or '-'.",
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save {stem}%s files (default: print to stdout)." % OUTPUT_SUFFIX,
    )

    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print output with this indent (default: compact).",
    )

    parser.add_argument(
        "--root-direction",
        choices=sorted(ROOT_DIRECTION_RULES),
        default=DEFAULT_ROOT_DIRECTION,
        help="Rule for setting the root text direction (default: %(default)s).",
    )

    parser.add_argument(
        "--strict-nesting",
        action=argparse.BooleanOptionalAction,
        default=DEFAULT_STRICT_NESTING,
        help="Fail on markups left open at the end of a section (default: %(default)s).",
    )

    parser.add_argument(
        "--validate",
        action=argparse.BooleanOptionalAction,
        default=DEFAULT_VALIDATE_OUTPUT,
        help="Validate output against the Lexical schema (default: %(default)s).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Returns the exit code; the console script passes it to sys.exit
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    output_dir: Optional[Path] = None
    if args.output_dir:
        output_dir = Path(args.output_dir).resolve()
        if not output_dir.is_dir():
            print("Error: Output directory does not exist: {}".format(output_dir), file=sys.stderr)
            return 1

    options = ConversionOptions(
        root_direction=args.root_direction,
        strict_nesting=args.strict_nesting,
        validate_output=args.validate,
    )

    inputs = args.inputs or [STDIN_NAME]
    failures = 0
    for name in inputs:
        if not _convert_one(name, options, args.indent, output_dir):
            failures += 1

    if output_dir is not None:
        _status("Done! Converted {} of {} input(s)".format(len(inputs) - failures, len(inputs)))

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
