"""Decode PSY-Q linker symbol files (.sym).

File layout:
    "MND"                         -- Signature (offset 0-2)
    [5 bytes]                     -- Reserved, skipped (offset 3-7)
    value:u32le kind:u8 len:u8 name[len]
    ...repeated to end of file...

Kinds seen in practice are 1 (equate) and 2 (label); anything else is
passed through untouched.
"""

import struct

from .errors import FormatError, TruncatedFileError, ReadError

SIGNATURE = b'MND'
HEADER_SIZE = 8

KIND_EQUATE = 1
KIND_LABEL = 2

KIND_NAMES = {
    KIND_EQUATE: 'equate',
    KIND_LABEL: 'label',
}


class Symbol:
    """One decoded symbol record. Immutable."""
    __slots__ = ('name', 'value', 'kind')

    def __init__(self, name, value, kind):
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'kind', kind)

    def __setattr__(self, attr, value):
        raise AttributeError(f"Symbol is immutable (cannot set {attr!r})")

    def __eq__(self, other):
        if not isinstance(other, Symbol):
            return NotImplemented
        return (self.name, self.value, self.kind) == \
            (other.name, other.value, other.kind)

    def __hash__(self):
        return hash((self.name, self.value, self.kind))

    def __repr__(self):
        return f"Symbol({self.name!r}, ${self.value:X}, {self.kind_name})"

    @property
    def is_equate(self) -> bool:
        return self.kind == KIND_EQUATE

    @property
    def is_label(self) -> bool:
        return self.kind == KIND_LABEL

    @property
    def kind_name(self) -> str:
        return KIND_NAMES.get(self.kind, f'unknown({self.kind})')


def _read(stream, count):
    """Read exactly *count* bytes or raise.

    Fewer bytes than asked for, or a zero-length field, means the file
    ended inside a record (TruncatedFileError). Stream failures raise
    ReadError.
    """
    if count == 0:
        raise TruncatedFileError("Reached end of symbol file prematurely")
    try:
        data = stream.read(count)
    except OSError as e:
        raise ReadError(f"Failed to read from symbol file: {e}") from e
    if len(data) < count:
        raise TruncatedFileError(
            f"Reached end of symbol file prematurely: expected {count} "
            f"bytes, got {len(data)}")
    return data


def _skip_header(stream):
    """Position the stream at the first record."""
    try:
        if stream.seekable():
            stream.seek(HEADER_SIZE)
        else:
            stream.read(HEADER_SIZE - len(SIGNATURE))
    except OSError as e:
        raise ReadError(f"Failed to read from symbol file: {e}") from e


def _peek(stream):
    """Read one byte, or b"" at a clean end of file."""
    try:
        first = stream.read(1)
    except OSError as e:
        raise ReadError(f"Failed to read from symbol file: {e}") from e
    return first


def check_signature(stream):
    """Read and validate the 3-byte signature.

    Raises:
        FormatError if the signature is not "MND" (including a file
            shorter than the signature)
        TruncatedFileError if the file is empty
    """
    try:
        sig = stream.read(len(SIGNATURE))
    except OSError as e:
        raise ReadError(f"Failed to read from symbol file: {e}") from e
    if not sig:
        raise TruncatedFileError("Reached end of symbol file prematurely")
    if sig != SIGNATURE:
        raise FormatError("Not a valid PSY-Q symbol file")


def iter_symbols(stream):
    """Yield Symbol records from a binary stream positioned at offset 0.

    Single pass: the stream is consumed as records are produced and
    nothing is retained between records.

    Raises:
        FormatError, TruncatedFileError, ReadError
    """
    check_signature(stream)
    _skip_header(stream)

    while True:
        first = _peek(stream)
        if not first:
            return
        value, = struct.unpack('<I', first + _read(stream, 3))
        kind = _read(stream, 1)[0]
        name_len = _read(stream, 1)[0]
        # bytes.upper() only folds ASCII letters
        raw = _read(stream, name_len).upper()
        name = raw.decode('ascii', 'surrogateescape')
        yield Symbol(name, value, kind)


def read_symbol_file(path):
    """Decode every record in *path*.

    The file is closed before returning, on success or failure.

    Returns:
        List of Symbol in file order
    """
    try:
        f = open(path, 'rb')
    except OSError as e:
        raise ReadError(f'Cannot open "{path}" for reading: {e.strerror}',
                        path) from e
    with f:
        try:
            return list(iter_symbols(f))
        except FormatError as e:
            raise FormatError(
                f'"{path}" is not a valid PSY-Q symbol file', path) from e
        except (TruncatedFileError, ReadError) as e:
            e.path = path
            raise
