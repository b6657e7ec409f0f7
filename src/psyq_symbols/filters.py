"""Symbol inclusion / exclusion rules.

Precedence, later steps override earlier ones:
  1. Baseline: include everything when no prefix or suffix includes are
     set; otherwise include only names matching an exact include, a
     prefix include or a suffix include.
  2. Exact / prefix / suffix excludes drop the symbol.
  3. Kind flags drop all equates and/or all labels.

Names and rule entries are both upper-cased, so matching is
case-insensitive.
"""

import os

from .records import KIND_EQUATE, KIND_LABEL


def _fold(entry):
    """Upper-case *entry* the way decoded symbol names are.

    Only ASCII letters change; other bytes become the same surrogate
    escapes the decoder produces, so non-ASCII entries still match.
    """
    return os.fsencode(entry).upper().decode('ascii', 'surrogateescape')


def _display(entry):
    return os.fsdecode(entry.encode('ascii', 'surrogateescape'))


def _normalize(entries):
    """Fold entries, dropping duplicates but keeping order."""
    seen = {}
    for entry in entries or ():
        seen.setdefault(_fold(entry), None)
    return tuple(seen)


class SymbolFilter:
    """Read-only filter configuration for one run."""
    __slots__ = ('include', 'exclude', 'include_prefixes', 'exclude_prefixes',
                 'include_suffixes', 'exclude_suffixes',
                 'exclude_equates', 'exclude_labels')

    def __init__(self, include=(), exclude=(),
                 include_prefixes=(), exclude_prefixes=(),
                 include_suffixes=(), exclude_suffixes=(),
                 exclude_equates=False, exclude_labels=False):
        self.include = frozenset(_normalize(include))
        self.exclude = frozenset(_normalize(exclude))
        self.include_prefixes = _normalize(include_prefixes)
        self.exclude_prefixes = _normalize(exclude_prefixes)
        self.include_suffixes = _normalize(include_suffixes)
        self.exclude_suffixes = _normalize(exclude_suffixes)
        self.exclude_equates = bool(exclude_equates)
        self.exclude_labels = bool(exclude_labels)

    @property
    def is_passthrough(self) -> bool:
        """True if this filter accepts every symbol."""
        return not (self.include_prefixes or self.include_suffixes
                    or self.exclude or self.exclude_prefixes
                    or self.exclude_suffixes
                    or self.exclude_equates or self.exclude_labels)

    def _included(self, name):
        if not self.include_prefixes and not self.include_suffixes:
            return True
        return (name in self.include
                or name.startswith(self.include_prefixes)
                or name.endswith(self.include_suffixes))

    def _excluded(self, name):
        return (name in self.exclude
                or name.startswith(self.exclude_prefixes)
                or name.endswith(self.exclude_suffixes))

    def accepts(self, symbol) -> bool:
        """Decide whether *symbol* belongs in the output."""
        name = symbol.name
        if not self._included(name):
            return False
        if self._excluded(name):
            return False
        if symbol.kind == KIND_EQUATE and self.exclude_equates:
            return False
        if symbol.kind == KIND_LABEL and self.exclude_labels:
            return False
        return True

    def apply(self, symbols):
        """Return the accepted symbols as a list, in input order."""
        return [s for s in symbols if self.accepts(s)]

    def describe(self) -> str:
        """One-line summary of the active rules."""
        if self.is_passthrough:
            return "all symbols"
        parts = []
        for label, entries in (('include', sorted(self.include)),
                               ('exclude', sorted(self.exclude)),
                               ('prefix+', self.include_prefixes),
                               ('prefix-', self.exclude_prefixes),
                               ('suffix+', self.include_suffixes),
                               ('suffix-', self.exclude_suffixes)):
            if entries:
                parts.append(f"{label} {','.join(map(_display, entries))}")
        if self.exclude_equates:
            parts.append("no equates")
        if self.exclude_labels:
            parts.append("no labels")
        return '; '.join(parts)
