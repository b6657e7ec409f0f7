"""Extraction pipeline: decode, filter, sort, render.

Nothing is written until decoding and filtering have both succeeded,
so a bad input never leaves a half-written equates file behind.
"""

from .equates import column_width, render_equates, write_equates
from .filters import SymbolFilter
from .records import read_symbol_file

WIDTH_ACCEPTED = 'accepted'
WIDTH_SCANNED = 'scanned'
WIDTH_SOURCES = (WIDTH_ACCEPTED, WIDTH_SCANNED)


class Extraction:
    """Result of one extraction run."""
    __slots__ = ('source_path', 'symbols', 'scanned', 'width', 'text')

    def __init__(self, source_path, symbols, scanned, width, text):
        self.source_path = source_path
        self.symbols = symbols
        self.scanned = scanned
        self.width = width
        self.text = text


def select_symbols(decoded, symbol_filter=None, width_source=WIDTH_ACCEPTED):
    """Filter and order decoded symbols.

    Args:
        decoded: Symbols in file order
        symbol_filter: SymbolFilter (default: accept everything)
        width_source: 'accepted' to align on kept names only,
            'scanned' to align on every decoded name

    Returns:
        (symbols sorted by value, column width)
    """
    if width_source not in WIDTH_SOURCES:
        raise ValueError(f"Unknown width source: {width_source!r}")
    if symbol_filter is None:
        symbol_filter = SymbolFilter()

    kept = symbol_filter.apply(decoded)
    basis = kept if width_source == WIDTH_ACCEPTED else decoded
    width = column_width(s.name for s in basis)

    # sorted() is stable: equal values keep file order
    return sorted(kept, key=lambda s: s.value), width


def extract_symbols(input_path, symbol_filter=None,
                    width_source=WIDTH_ACCEPTED) -> Extraction:
    """Decode *input_path* and render its equates without writing them."""
    decoded = read_symbol_file(input_path)
    symbols, width = select_symbols(decoded, symbol_filter, width_source)
    text = render_equates(symbols, input_path, width)
    return Extraction(input_path, symbols, len(decoded), width, text)


def run_extraction(input_path, output_path, symbol_filter=None,
                   width_source=WIDTH_ACCEPTED) -> Extraction:
    """Extract symbols from *input_path* and write them to *output_path*."""
    result = extract_symbols(input_path, symbol_filter, width_source)
    write_equates(output_path, result.text)
    return result
