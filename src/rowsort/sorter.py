from __future__ import annotations

import logging
from collections.abc import Iterable, MutableSequence, Sequence

from .errors import SortSpecError
from .headers import HeaderIndex

Row = Sequence[str]
Table = MutableSequence[Row]

log = logging.getLogger(__name__)


def field_at(row: Row, position: int) -> str:
    if 0 <= position < len(row):
        return row[position]
    return ""


def validate_sort_spec(keys: Iterable[int]) -> tuple[int, ...]:
    spec = tuple(keys)
    if not spec:
        raise SortSpecError("At least one column key is required.", spec)
    if 0 in spec:
        raise SortSpecError(
            f"Column key 0 is not valid; keys start at 1 (got {list(spec)}).", spec
        )
    return spec


def _split_key(key: int) -> tuple[int, bool]:
    return abs(key) - 1, key < 0


def compare_rows(p: Row, q: Row, keys: Sequence[int]) -> int:
    for key in keys:
        position, reverse = _split_key(key)
        a = field_at(p, position)
        b = field_at(q, position)
        if a < b:
            return 1 if reverse else -1
        if b < a:
            return -1 if reverse else 1
    return 0


class RowKey:
    __slots__ = ("row", "keys")

    def __init__(self, row: Row, keys: Sequence[int]) -> None:
        self.row = row
        self.keys = keys

    def __lt__(self, other: RowKey) -> bool:
        return compare_rows(self.row, other.row, self.keys) < 0


def _reorder(rows: Table, keys: tuple[int, ...]) -> None:
    def make_key(row: Row) -> RowKey:
        return RowKey(row, keys)

    if isinstance(rows, list):
        rows.sort(key=make_key)
    else:
        rows[:] = sorted(rows, key=make_key)
    log.debug("Sorted %d rows by %s", len(rows), list(keys))


def sort_by(rows: Table, keys: Iterable[int]) -> None:
    _reorder(rows, validate_sort_spec(keys))


def sort_by_indices(rows: Table, *keys: int) -> None:
    sort_by(rows, keys)


def sort_by_headers(headers: HeaderIndex, rows: Table, *names: str) -> None:
    sort_by(rows, headers.resolve_all(names))


class MultiSorter:
    def __init__(self, rows: Table, keys: Iterable[int]) -> None:
        self.rows = rows
        self.keys = validate_sort_spec(keys)

    def __len__(self) -> int:
        return len(self.rows)

    def less(self, i: int, j: int) -> bool:
        return compare_rows(self.rows[i], self.rows[j], self.keys) < 0

    def swap(self, i: int, j: int) -> None:
        self.rows[i], self.rows[j] = self.rows[j], self.rows[i]

    def with_keys(self, *keys: int) -> MultiSorter:
        return MultiSorter(self.rows, keys)

    def sort(self) -> None:
        _reorder(self.rows, self.keys)
