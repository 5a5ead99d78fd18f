#!/usr/bin/env python3
# render_formula.py
# This file is part of GoloSpec - binary formula core for specification logic
#
# Command-line interface for reading, rendering and inspecting formulas

import sys
import argparse
from pathlib import Path
from typing import Optional

from formula import SYMBOLS, Operator, ParseError, UnknownOperatorError, read
from analysis import collect_atoms, count_operators, depth, tree_lines
from golospec_utils.logger import configure_logging, get_logger


def read_formula_file(filepath: Path) -> str:
    """Read formula text from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula text with surrounding whitespace removed

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty
    """
    with open(filepath, "r", encoding="utf-8") as f:
        content = f.read().strip()

    if not content:
        raise ValueError(f"Formula file is empty: {filepath}")

    return content


def print_symbol_table() -> None:
    """Print every operator with its canonical symbol."""
    logger = get_logger()
    width = max(len(op.name) for op in Operator)
    for op in Operator:
        logger.info(f"{op.name:<{width}}  {op.symbol}")


def print_statistics(tree) -> None:
    """Print atoms, depth and operator usage of a formula."""
    logger = get_logger()

    logger.info(f"Atoms: {', '.join(collect_atoms(tree))}")
    logger.info(f"Depth: {depth(tree)}")

    counts = count_operators(tree)
    # Table order, not frequency order
    for op in Operator:
        if counts[op]:
            logger.info(f"  {op.symbol:<3} {counts[op]}")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Read a fully parenthesized formula and print its canonical form",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  python render_formula.py "((x + y) * z)"
  python render_formula.py -f property.spec --tree
  python render_formula.py "((a < b) /\\ (b <= c))" --stats
  python render_formula.py --symbols

Operators:
  {' '.join(SYMBOLS)}
        """,
    )

    parser.add_argument("formula", nargs="?", help="Formula text")

    parser.add_argument(
        "-f", "--file", type=Path, help="Read the formula from a file instead"
    )

    parser.add_argument(
        "--tree", action="store_true", help="Print an indented outline of the formula"
    )

    parser.add_argument(
        "--stats", action="store_true", help="Print atoms, depth and operator counts"
    )

    parser.add_argument(
        "--symbols", action="store_true", help="Print the operator table and exit"
    )

    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only report errors"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --quiet)"
    )

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=not args.quiet, debug=args.debug)
    logger = get_logger()

    if args.symbols:
        print_symbol_table()
        return 0

    if (args.formula is None) == (args.file is None):
        parser.error("give exactly one of FORMULA or --file")

    try:
        text = read_formula_file(args.file) if args.file else args.formula
        tree = read(text)

        logger.info(tree.render())

        if args.tree:
            for line in tree_lines(tree):
                logger.info(line)

        if args.stats:
            print_statistics(tree)

        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except UnknownOperatorError as e:
        logger.error(f"{e} (known: {' '.join(SYMBOLS)})")
        return 3

    except (OSError, ValueError) as e:
        logger.error(f"Formula file error: {e}")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
