"""Command line entry point — run textformat operations on text or stdin."""

from __future__ import annotations

import argparse
import logging
import sys

from textformat.ansi import to_ansi
from textformat.base import InvalidBaseFormat, add_base
from textformat.config import ConfigError, load_config
from textformat.encode import colorize
from textformat.html import to_html
from textformat.sanitize import clean
from textformat.tokenizer import PatternEngineError, tokenize

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textformat", description="Convert and clean § formatted text."
    )
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--placeholder", help="shorthand placeholder (default from config)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("tokenize", help="print one segment per line")
    p_clean = sub.add_parser("clean", help="strip format and control codes")
    p_clean.add_argument("--keep-format", action="store_true", help="keep § codes")
    sub.add_parser("colorize", help="expand placeholder shorthand")
    p_base = sub.add_parser("base", help="add a base format surviving resets")
    p_base.add_argument("-f", "--format", help="base format (default from config)")
    sub.add_parser("html", help="convert to HTML spans")
    sub.add_parser("ansi", help="convert to ANSI escape sequences")

    for p in sub.choices.values():
        p.add_argument("text", nargs="?", help="input text (default: stdin)")
    return parser


def run(args: argparse.Namespace, config: dict) -> str:
    text = args.text if args.text is not None else sys.stdin.read()
    placeholder = args.placeholder or config["placeholder"]

    if args.command == "tokenize":
        return "\n".join(repr(part) for part in tokenize(text))
    if args.command == "clean":
        return clean(text, remove_format=config["remove_format"] and not args.keep_format)
    if args.command == "colorize":
        return colorize(text, placeholder)
    if args.command == "base":
        base_format = colorize(args.format or config["base_format"], placeholder)
        return add_base(base_format, text)
    if args.command == "html":
        return to_html(text)
    return to_ansi(text)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config)
    except ConfigError as exc:
        log.error("%s", exc)
        return 1

    logging.basicConfig(
        level=getattr(logging, str(config["log_level"]).upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        output = run(args, config)
    except (PatternEngineError, InvalidBaseFormat) as exc:
        log.error("%s", exc)
        return 1
    sys.stdout.write(output)
    if output and not output.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
