from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TextIO

DEFAULT_SEPARATOR = ", "


def format_rows(
    label: str, rows: Iterable[Sequence[str]], sep: str = DEFAULT_SEPARATOR
) -> str:
    lines = ["", f"{label}:"]
    lines.extend(sep.join(row) for row in rows)
    return "\n".join(lines) + "\n"


def print_rows(
    label: str,
    rows: Iterable[Sequence[str]],
    sep: str = DEFAULT_SEPARATOR,
    file: TextIO | None = None,
) -> None:
    print(format_rows(label, rows, sep), end="", file=file)
