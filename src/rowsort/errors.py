from __future__ import annotations

from collections.abc import Iterable


class RowsortError(Exception):
    """Base class for errors raised by rowsort."""


class UnknownHeaderError(RowsortError, KeyError):
    def __init__(self, name: str, known: Iterable[str] = ()) -> None:
        self.name = name
        self.known = tuple(sorted(known))
        super().__init__(name)

    def __str__(self) -> str:
        known = ", ".join(repr(item) for item in self.known)
        return f"Unknown column header: {self.name} (known: {known})"


class SortSpecError(RowsortError, ValueError):
    def __init__(self, message: str, keys: Iterable[int] = ()) -> None:
        self.keys = tuple(keys)
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])
