"""Shared type aliases for ballots and rank variants."""

from collections.abc import Sequence
from typing import Literal, TypeAlias

import numpy as np

Ballot: TypeAlias = Sequence[str]
RankMethod: TypeAlias = Literal["competition", "competition_max", "dense", "avg"]
RankResult: TypeAlias = np.ndarray | tuple[np.ndarray, np.ndarray]
