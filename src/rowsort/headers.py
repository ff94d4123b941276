from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from .errors import UnknownHeaderError

DEFAULT_REVERSE_PREFIX = "-"

log = logging.getLogger(__name__)


class HeaderIndex(Mapping[str, int]):
    def __init__(
        self,
        titles: Iterable[str],
        *,
        reverse_prefix: str = DEFAULT_REVERSE_PREFIX,
    ) -> None:
        if not isinstance(reverse_prefix, str) or not reverse_prefix:
            raise ValueError(
                f"reverse_prefix must be a non-empty string (got {reverse_prefix!r})."
            )
        self._titles = tuple(titles)
        self._reverse_prefix = reverse_prefix
        self._keys: dict[str, int] = {}
        for position, title in enumerate(self._titles, start=1):
            if not title:
                continue
            self._register(title, position)
            self._register(f"{reverse_prefix}{title}", -position)
        log.debug(
            "Built header index for %d titles (%d names)",
            len(self._titles),
            len(self._keys),
        )

    def _register(self, name: str, key: int) -> None:
        previous = self._keys.get(name)
        if previous is not None and previous != key:
            log.debug("Header %r moved from %d to %d", name, previous, key)
        self._keys[name] = key

    @property
    def titles(self) -> tuple[str, ...]:
        return self._titles

    @property
    def reverse_prefix(self) -> str:
        return self._reverse_prefix

    def resolve(self, name: str) -> int:
        try:
            return self._keys[name]
        except KeyError:
            raise UnknownHeaderError(name, self._keys) from None

    def resolve_all(self, names: Iterable[str]) -> list[int]:
        return [self.resolve(name) for name in names]

    def __getitem__(self, name: str) -> int:
        return self.resolve(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"HeaderIndex({list(self._titles)!r})"


def build_header_index(
    titles: Iterable[str], *, reverse_prefix: str = DEFAULT_REVERSE_PREFIX
) -> HeaderIndex:
    return HeaderIndex(titles, reverse_prefix=reverse_prefix)
