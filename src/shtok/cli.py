"""Command-line interface for shtok."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from shtok.classifier import DEFAULT_CLASSIFIER, SET_NAMES, Classifier
from shtok.errors import ScanError, ShlexError

logger = logging.getLogger(__name__)

FORMATS = ("lines", "json", "null")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    output_file: Path | None
    output_format: str
    classifier: Classifier
    tokens: bool
    verbose: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="shtok",
        description="Split text into words using shell-style quoting rules",
    )
    p.add_argument("input", nargs="?", default=None, help="Input file (default: stdin)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: lines)",
    )
    p.add_argument(
        "--word-chars",
        action="append",
        default=[],
        metavar="CHARS",
        help="Extra characters allowed in unquoted words (repeatable)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover shtok.toml)",
    )
    p.add_argument("--tokens", action="store_true", help="Dump raw tokens, comments included")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def load_config(config_path: Path | None, base_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else base_dir / "shtok.toml"

    if not path.is_file():
        if config_path is not None:
            raise argparse.ArgumentTypeError(f"config file not found: {path}")
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def build_classifier(config: dict[str, Any], extra_chars: list[str]) -> Classifier:
    """Build a classifier from the [classifier] config table and extra word chars."""
    table = config.get("classifier", {})
    if not isinstance(table, dict):
        raise argparse.ArgumentTypeError("[classifier] must be a table")

    sets: dict[str, str] = {}
    extra = ""
    for key, value in table.items():
        if not isinstance(value, str):
            raise argparse.ArgumentTypeError(f"classifier.{key} must be a string")
        if key == "extra_chars":
            extra += value
        elif key in SET_NAMES:
            sets[key] = value
        else:
            raise argparse.ArgumentTypeError(f"unknown classifier key: {key}")

    extra += "".join(extra_chars)
    if not sets and not extra:
        return DEFAULT_CLASSIFIER
    classifier = Classifier(**sets) if sets else DEFAULT_CLASSIFIER
    if extra:
        classifier = classifier.with_extra(chars=extra)
    return classifier


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input) if args.input and args.input != "-" else None

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, Path("."))

    output_format = "lines"
    cfg_format = config.get("format")
    if cfg_format is not None:
        if cfg_format not in FORMATS:
            raise argparse.ArgumentTypeError(
                f"invalid format in config: {cfg_format!r} (expected one of {', '.join(FORMATS)})"
            )
        output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        output_format=output_format,
        classifier=build_classifier(config, args.word_chars),
        tokens=args.tokens,
        verbose=args.verbose,
    )


def format_words(words: list[str], output_format: str) -> str:
    """Render words in the requested output format."""
    if output_format == "json":
        return json.dumps(words) + "\n"
    if output_format == "null":
        return "".join(f"{w}\0" for w in words)
    return "".join(f"{w}\n" for w in words)


def read_input(options: CliOptions) -> str:
    if options.input_file is None:
        return sys.stdin.read()
    return options.input_file.read_text(encoding="utf-8")


def run(options: CliOptions, text: str, out: TextIO) -> None:
    """Tokenize *text* and write the result to *out*.

    Raises ShlexError after writing whatever was produced before the error.
    """
    from shtok.debug import dump_tokens
    from shtok.lexer import split
    from shtok.tokenizer import Tokenizer

    if options.tokens:
        count = dump_tokens(Tokenizer(text, options.classifier), file=out)
        logger.debug("dumped %d token(s)", count)
        return

    try:
        words = split(text, options.classifier)
    except ShlexError as exc:
        out.write(format_words(exc.words, options.output_format))
        raise
    out.write(format_words(words, options.output_format))


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    configure_logging(options.verbose)

    try:
        text = read_input(options)
        out: TextIO = (
            open(options.output_file, "w", encoding="utf-8")
            if options.output_file
            else sys.stdout
        )
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    filename = str(options.input_file) if options.input_file else "<stdin>"
    try:
        run(options, text, out)
    except ScanError as exc:
        print(exc.format(filename), file=sys.stderr)
        return 1
    except ShlexError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return 1
    finally:
        if out is not sys.stdout:
            out.close()

    return 0
