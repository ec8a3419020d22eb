"""
Pytest configuration and shared fixtures.
"""

import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import TypeVar

import pytest

T = TypeVar("T")


class FixedRandom:
    """
    Deterministic stand-in for random.Random.

    random() returns the given draws in order; choice() picks the element at
    the next given index (modulo the sequence length). Both cycle.
    """

    def __init__(self, draws: Sequence[float], picks: Sequence[int]) -> None:
        self.draws = list(draws)
        self.picks = list(picks)
        self._draw = 0
        self._pick = 0

    def random(self) -> float:
        value = self.draws[self._draw % len(self.draws)]
        self._draw += 1
        return value

    def choice(self, seq: Sequence[T]) -> T:
        index = self.picks[self._pick % len(self.picks)]
        self._pick += 1
        return seq[index % len(seq)]


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def c_major() -> list[str]:
    """C major scale as names."""
    return ["C", "D", "E", "F", "G", "A", "B"]


@pytest.fixture
def a_minor() -> list[str]:
    """A natural minor scale as names."""
    return ["A", "B", "C", "D", "E", "F", "G"]
