"""psyq-symbols: Convert PSY-Q linker symbol files to assembler equates.

Supports:
  - PSY-Q .sym files ("MND" signature, little-endian records)
  - Include / exclude by exact name, prefix and suffix
  - Dropping all equates or all labels
  - Value-sorted, column-aligned "NAME equ $VALUE" output

Architecture:
  records  decodes the binary file into Symbol objects.
  filters  decides which symbols to keep.
  equates  renders the kept symbols as assembler text.
  extract  runs the whole pipeline and writes the result.
"""

__version__ = '1.0.0'

from .errors import (SymbolFileError, FormatError, TruncatedFileError,
                     ReadError, WriteError)
from .records import Symbol, iter_symbols, read_symbol_file
from .filters import SymbolFilter
from .extract import extract_symbols, run_extraction
