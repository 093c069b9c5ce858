"""
Command-line front end for the expression evaluator.

Author: xwest
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import ParserConfig, DEFAULT_MAX_DEPTH
from .driver import evaluate
from .lexer.errors import LexerError
from .parser.ast_nodes import format_tree
from .parser.errors import ParseError
from .parser.parser import Parser


DEMO_EXPRESSION = "5+6*6"


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprcalc",
        description="Evaluate integer arithmetic expressions. All operators have "
                    "equal precedence and are applied left to right.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    exprcalc                          # Evaluate the demo expression 5+6*6
    exprcalc "1 + 3 * 4"              # Prints 1 + 3 * 4 = 16
    exprcalc "4 + (12 / (1 * 2))" "5 / 0"
    exprcalc --bits 32 --strict "2147483648"
    exprcalc -- "-(5)"                # Use -- before an expression starting with "-"
        """
    )

    parser.add_argument('expressions', nargs='*', metavar='EXPRESSION',
                        help=f'Expression to evaluate (default: {DEMO_EXPRESSION})')
    parser.add_argument('--bits', type=int, default=None,
                        help='Reject literals that do not fit a signed integer of this width')
    parser.add_argument('--max-depth', type=int, default=DEFAULT_MAX_DEPTH,
                        help='Maximum nesting of parentheses and negations '
                             '(capped by the interpreter recursion limit)')
    parser.add_argument('--tree', action='store_true',
                        help='Print the parsed tree instead of evaluating it')
    parser.add_argument('--strict', action='store_true',
                        help='Exit with status 1 if any expression fails')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status."""
    args = build_argument_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s"
    )

    try:
        config = ParserConfig(integer_bits=args.bits, max_depth=args.max_depth)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    parser = Parser(config)
    failures = 0

    for expression in args.expressions or [DEMO_EXPRESSION]:
        if args.tree:
            try:
                print(format_tree(parser.parse_tree(expression)))
            except (LexerError, ParseError) as e:
                print(f"Error: {e}", file=sys.stderr)
                failures += 1
            continue

        result = evaluate(expression, parser=parser)
        if result.success:
            print(result.message)
        else:
            print(f"Error: {result.message}", file=sys.stderr)
            failures += 1

    if args.strict and failures:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
