"""Render symbols as assembler equates.

Output:
    ; ------------------------------------------------------------------------------
    ; Symbols extracted from
    ; <input path>
    ; ------------------------------------------------------------------------------

    NAME            equ $1234
    ...

    ; ------------------------------------------------------------------------------
"""

from .errors import WriteError

RULE = '; ' + '-' * 78
TAB = 8


def column_width(names) -> int:
    """Name column width: next multiple of 8 above the longest name."""
    longest = max((len(n) for n in names), default=0)
    return (longest & ~(TAB - 1)) + TAB


def format_value(value: int) -> str:
    """Small values in decimal, everything else as $hex."""
    if value < 10:
        return str(value)
    return f"${value:X}"


def format_equate(symbol, width: int) -> str:
    return f"{symbol.name.ljust(width)}equ {format_value(symbol.value)}"


def render_equates(symbols, source_path, width=None) -> str:
    """Build the complete equates file text.

    Args:
        symbols: Symbols in output order
        source_path: Input path quoted in the banner
        width: Name column width (default: computed from *symbols*)
    """
    if width is None:
        width = column_width(s.name for s in symbols)
    lines = [
        RULE,
        '; Symbols extracted from',
        f'; {source_path}',
        RULE,
        '',
    ]
    lines.extend(format_equate(s, width) for s in symbols)
    lines.append('')
    lines.append(RULE)
    return '\n'.join(lines) + '\n'


def write_equates(path, text):
    """Write rendered equates to *path*."""
    try:
        with open(path, 'w', encoding='utf-8', errors='surrogateescape',
                  newline='\n') as f:
            f.write(text)
    except OSError as e:
        raise WriteError(f'Cannot write "{path}": {e.strerror}', path) from e
