"""Error types for psyq-symbols."""


class SymbolFileError(Exception):
    """Base error for psyq-symbols."""

    def __init__(self, message, path=None):
        self.path = path
        super().__init__(message)


class FormatError(SymbolFileError):
    """Input does not start with the PSY-Q symbol file signature."""
    pass


class TruncatedFileError(SymbolFileError):
    """Symbol file ended in the middle of a record."""
    pass


class ReadError(SymbolFileError):
    """Failed to open or read from the symbol file."""
    pass


class WriteError(SymbolFileError):
    """Failed to open or write the equates file."""
    pass
