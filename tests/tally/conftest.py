from __future__ import annotations

from itertools import permutations

import pytest

from copeland.tally import Copeland


@pytest.fixture
def names() -> list[str]:
    return ["A", "B", "C"]


@pytest.fixture
def engine(names: list[str]) -> Copeland:
    return Copeland(names)


@pytest.fixture(scope="session")
def cyclic_ballots() -> list[list[str]]:
    # A>B, B>C and C>A each by 2-1
    return [["A", "B", "C"], ["B", "C", "A"], ["C", "A", "B"]]


@pytest.fixture(scope="session")
def mixed_ballots() -> list[list[str]]:
    ballots = [list(p) for p in permutations(["A", "B", "C", "D"])]
    return ballots[:9] + [["A", "B", "C", "D"]] * 3 + [["D", "C", "A", "B"]] * 2
