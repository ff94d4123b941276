from __future__ import annotations

import tomllib
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .display import DEFAULT_SEPARATOR
from .headers import DEFAULT_REVERSE_PREFIX, HeaderIndex


def _normalize_prefix(prefix: object) -> str:
    if not isinstance(prefix, str) or not prefix.strip():
        return DEFAULT_REVERSE_PREFIX
    return prefix.strip()


def _normalize_separator(separator: object) -> str:
    if not isinstance(separator, str) or separator == "":
        return DEFAULT_SEPARATOR
    return separator


@dataclass(frozen=True)
class RowsortConfig:
    reverse_prefix: str = DEFAULT_REVERSE_PREFIX
    separator: str = DEFAULT_SEPARATOR

    @classmethod
    def load(cls, root: Path) -> RowsortConfig:
        pyproject = root / "pyproject.toml"
        prefix: object = None
        separator: object = None

        if pyproject.exists():
            with pyproject.open("rb") as handle:
                data = tomllib.load(handle)
            tool_cfg = data.get("tool", {}).get("rowsort", {})
            prefix = tool_cfg.get("reverse_prefix")
            separator = tool_cfg.get("separator")

        return cls(
            reverse_prefix=_normalize_prefix(prefix),
            separator=_normalize_separator(separator),
        )

    def header_index(self, titles: Iterable[str]) -> HeaderIndex:
        return HeaderIndex(titles, reverse_prefix=self.reverse_prefix)
