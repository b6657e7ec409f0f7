"""psyq-symbols CLI -- Convert a PSY-Q symbol file to assembler equates.

Usage:
    extract-psyq-symbols game.sym symbols.inc
    extract-psyq-symbols game.sym symbols.inc -p OBJ_ -p VAR_
    extract-psyq-symbols game.sym symbols.inc -S _LOOP --no-labels

Pipeline:
    1. Decode symbol records
    2. Apply include / exclude rules
    3. Sort by value
    4. Write aligned equ lines
"""

import argparse
import sys

from .errors import SymbolFileError
from .extract import run_extraction, WIDTH_SOURCES, WIDTH_ACCEPTED
from .filters import SymbolFilter


def _split_lists(values):
    """Flatten repeated options, each of which may be comma-separated."""
    out = []
    for v in values or ():
        out.extend(part.strip() for part in v.split(',') if part.strip())
    return out


def build_filter(args) -> SymbolFilter:
    """Build the SymbolFilter described by parsed arguments."""
    return SymbolFilter(
        include=_split_lists(args.include),
        exclude=_split_lists(args.exclude),
        include_prefixes=_split_lists(args.include_prefix),
        exclude_prefixes=_split_lists(args.exclude_prefix),
        include_suffixes=_split_lists(args.include_suffix),
        exclude_suffixes=_split_lists(args.exclude_suffix),
        exclude_equates=args.no_equates,
        exclude_labels=args.no_labels,
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog='extract-psyq-symbols',
        description='Extract symbols from a PSY-Q symbol file as equates.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Filtering:
  With no -p/-s options every symbol is included. Once any prefix or
  suffix include is given, only names matching an -i name, -p prefix
  or -s suffix are kept. Excludes (-x, -P, -S) and --no-equates /
  --no-labels are applied afterwards and always win.

Examples:
  extract-psyq-symbols main.sym main.inc
  extract-psyq-symbols main.sym main.inc -p PLAYER_ -i GAMEMODE
  extract-psyq-symbols main.sym main.inc -S _END,_SIZE --no-labels""")

    parser.add_argument('input', help='Input PSY-Q symbol file (.sym)')
    parser.add_argument('output', help='Output assembler file')

    parser.add_argument('-i', '--include', action='append', metavar='NAME',
                        help='Include symbol by exact name')
    parser.add_argument('-x', '--exclude', action='append', metavar='NAME',
                        help='Exclude symbol by exact name')
    parser.add_argument('-p', '--include-prefix', action='append',
                        metavar='PREFIX',
                        help='Include symbols starting with PREFIX')
    parser.add_argument('-P', '--exclude-prefix', action='append',
                        metavar='PREFIX',
                        help='Exclude symbols starting with PREFIX')
    parser.add_argument('-s', '--include-suffix', action='append',
                        metavar='SUFFIX',
                        help='Include symbols ending with SUFFIX')
    parser.add_argument('-S', '--exclude-suffix', action='append',
                        metavar='SUFFIX',
                        help='Exclude symbols ending with SUFFIX')
    parser.add_argument('--no-equates', action='store_true',
                        help='Exclude all equate symbols')
    parser.add_argument('--no-labels', action='store_true',
                        help='Exclude all label symbols')

    parser.add_argument('--width-from', choices=WIDTH_SOURCES,
                        default=WIDTH_ACCEPTED,
                        help='Align on accepted names (default) or on every '
                             'name in the file')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Show filter and alignment details')
    return parser


def main(argv=None):
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        return run(args)
    except SymbolFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Unexpected error: {type(e).__name__}: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 2


def run(args) -> int:
    """Execute the extraction."""
    symbol_filter = build_filter(args)
    if args.verbose:
        print(f"Filter: {symbol_filter.describe()}")

    result = run_extraction(args.input, args.output, symbol_filter,
                            width_source=args.width_from)

    if args.verbose:
        print(f"Column width: {result.width} ({args.width_from} names)")
    print(f"{len(result.symbols)} of {result.scanned} symbols written to "
          f"{args.output}")
    return 0
