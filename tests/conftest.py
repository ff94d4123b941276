from __future__ import annotations

import pytest

SONG_TITLES = ["author", "year", "title"]


def _song_rows() -> list[list[str]]:
    return [
        ["John Lennon", "1968", "Let It Be"],
        ["John Lennon", "1965", "Let It Be"],
        ["John Lennon", "1965", "12-Bar Original"],
        ["Paul McCartney", "1963", "All My Loving"],
        ["George Harrison", "1968", "While My Guitar Gently Weeps"],
        ["Ringo Star", "1965", "Untitled"],
    ]


@pytest.fixture
def song_rows() -> list[list[str]]:
    return _song_rows()


@pytest.fixture
def ragged_song_rows() -> list[list[str]]:
    return [*_song_rows(), ["Ringo Star"]]


@pytest.fixture
def song_titles() -> list[str]:
    return list(SONG_TITLES)
