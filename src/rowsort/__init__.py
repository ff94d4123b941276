"""rowsort sorts rows of text fields by several columns at once."""

from .config import RowsortConfig
from .display import format_rows, print_rows
from .errors import RowsortError, SortSpecError, UnknownHeaderError
from .headers import HeaderIndex, build_header_index
from .sorter import (
    MultiSorter,
    RowKey,
    compare_rows,
    field_at,
    sort_by,
    sort_by_headers,
    sort_by_indices,
    validate_sort_spec,
)

__all__ = [
    "HeaderIndex",
    "MultiSorter",
    "RowKey",
    "RowsortConfig",
    "RowsortError",
    "SortSpecError",
    "UnknownHeaderError",
    "build_header_index",
    "compare_rows",
    "field_at",
    "format_rows",
    "print_rows",
    "sort_by",
    "sort_by_headers",
    "sort_by_indices",
    "validate_sort_spec",
]
