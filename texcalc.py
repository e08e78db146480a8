"""texcalc entrypoint module exposing the public API and CLI."""

import argparse
import logging
import os
import sys

from texcalc_lang import (
    ParseError,
    ParserSettings,
    Program,
    format_tree,
    parse,
    parse_statement,
)

__all__ = [
    "ParseError",
    "ParserSettings",
    "Program",
    "format_tree",
    "parse",
    "parse_statement",
    "configure_logging",
    "render",
    "run_repl",
    "main",
]

logger = logging.getLogger("texcalc")


def configure_logging(verbose: bool) -> None:
    level_name = os.environ.get("TEXCALC_LOG_LEVEL", "DEBUG" if verbose else "WARNING")
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def render(node, as_tree: bool) -> str:
    return format_tree(node) if as_tree else repr(node)


def report(err: ParseError, source: str) -> None:
    print(f"Parse error: {err}", file=sys.stderr)
    context = err.context(source)
    if context:
        print(context, file=sys.stderr)


def run_repl(settings: ParserSettings, as_tree: bool):  # pragma: no cover
    print("texcalc interactive parser")
    print("Type 'exit' to leave.")
    while True:
        try:
            text = input(">> ").strip()
        except EOFError:
            break
        if not text:
            continue
        if text in ("exit", "quit"):
            break
        try:
            print(render(parse_statement(text, settings), as_tree))
        except ParseError as e:
            report(e, text)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Parse texcalc notation into an AST")
    parser.add_argument("script", nargs="?", help="Path to a source file")
    parser.add_argument("-e", "--expression", help="Parse the given text instead of a file")
    parser.add_argument(
        "--tree", action="store_true", help="Print an indented tree instead of repr()"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log parser activity at DEBUG level"
    )
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    settings = ParserSettings.from_env()

    if args.expression is not None:
        source = args.expression
    elif args.script:
        try:
            with open(args.script, "r", encoding="utf-8") as f:
                source = f.read()
        except OSError as e:
            print(f"Cannot read {args.script}: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        run_repl(settings, args.tree)
        return

    try:
        program = parse(source, settings)
    except ParseError as e:
        report(e, source)
        sys.exit(1)

    logger.info("Parsed %d statement(s)", len(program))
    for statement in program:
        print(render(statement, args.tree))


if __name__ == "__main__":
    main()
