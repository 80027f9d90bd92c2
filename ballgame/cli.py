from __future__ import annotations

import argparse
import logging
import sys

from ballgame.config import get_log_level, strict_brackets_enabled
from ballgame.interpreter import Interpreter
from ballgame.repl import run_repl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ballgame",
        description="Evaluate a Ballgame expression, or start a REPL when none is given.",
    )
    parser.add_argument("expression", nargs="?", help="expression to evaluate once")
    parser.add_argument(
        "--strict-brackets",
        action="store_true",
        default=None,
        help="require each closing bracket to match its opening bracket",
    )
    parser.add_argument("--log-level", help="logging level (default: $LOGLEVEL or WARNING)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=get_log_level(args.log_level),
        format="%(message)s",
        stream=sys.stderr,
    )
    strict = args.strict_brackets if args.strict_brackets is not None else strict_brackets_enabled()
    interpreter = Interpreter(strict_brackets=strict)
    if args.expression is None:
        run_repl(interpreter)
    else:
        print(interpreter.eval_string(args.expression))
    return 0
