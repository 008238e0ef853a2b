"""
Command-line entry point.

Usage:
    python -m clear_arc records.txt
    cat records.txt | python -m clear_arc -
    python -m clear_arc records.txt --precision 3 --show-leaves -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from clear_arc.api import find_largest_clear_arc
from clear_arc.debug import format_bound, log_result, setup_debug_logging
from clear_arc.records import ValidationError, load_records

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='clear_arc',
        description="Find the largest arc of the cyclic unit domain not covered by any record.",
    )
    parser.add_argument(
        'input',
        nargs='?',
        default='-',
        help="File with one 'x1 x2' record per line, or '-' for stdin (default)",
    )
    parser.add_argument(
        '--precision',
        type=int,
        default=6,
        help="Digits after the decimal point in the output (default: 6)",
    )
    parser.add_argument(
        '--no-early-stop',
        action='store_true',
        help="Validate every record even after the domain is fully covered",
    )
    parser.add_argument(
        '--show-leaves',
        action='store_true',
        help="Also print the remaining clear segments",
    )
    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help="Log progress to stderr (-v info, -vv debug)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.precision < 0:
        print("error: --precision must be non-negative", file=sys.stderr)
        return 2

    if args.verbose:
        setup_debug_logging(logging.DEBUG if args.verbose > 1 else logging.INFO)

    try:
        records = load_records(sys.stdin if args.input == '-' else args.input)
        result = find_largest_clear_arc(
            records,
            stop_when_covered=not args.no_early_stop,
            return_leaves=args.show_leaves,
        )
    except ValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"error: cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    log_result(result, logger)

    print(f"{format_bound(result.start, args.precision)} {format_bound(result.end, args.precision)}")
    if args.show_leaves and result.leaves is not None:
        for x1, x2 in result.leaves:
            print(f"  {format_bound(x1, args.precision)} {format_bound(x2, args.precision)}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
