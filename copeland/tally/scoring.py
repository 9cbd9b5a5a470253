"""
Scoring rules and score ranking.

A Copeland score adds one weight per opponent: ``win`` when the alternative
beats the opponent head-to-head, ``loss`` when it is beaten, ``tie`` when the
two pairwise counts are equal.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from copeland.utils import rank_scores


@dataclass(frozen=True)
class Scoring:
    """Per-comparison weights for a Copeland score."""

    win: float = 1.0
    tie: float = 0.5
    loss: float = 0.0

    def __post_init__(self) -> None:
        for field in ("win", "tie", "loss"):
            value = getattr(self, field)
            if not math.isfinite(value):
                raise ValueError(f"{field} weight must be finite, got {value}")


DEFAULT_SCORING = Scoring()


@dataclass(frozen=True)
class ScoreEntry:
    name: str
    score: float


def _sort_key(entry: ScoreEntry) -> tuple[float, str]:
    return (-entry.score, entry.name)


def rank_by_score(
    scores: Sequence[ScoreEntry],
    tol: float = 0.0,
) -> list[list[ScoreEntry]]:
    """
    Order score entries and group them into ranks.

    Args:
        scores: Score entries, in any order. Not modified.
        tol: Scores within ``tol`` of their neighbour share a rank. The
            default ``0.0`` groups only exactly equal scores.

    Returns:
        Rank groups from best to worst. Entries inside a group are ordered
        by name.

    Examples:
        >>> groups = rank_by_score([
        ...     ScoreEntry("B", 1.0),
        ...     ScoreEntry("A", 2.0),
        ...     ScoreEntry("C", 1.0),
        ... ])
        >>> [[e.name for e in g] for g in groups]
        [['A'], ['B', 'C']]
    """
    ordered = sorted(scores, key=_sort_key)
    if not ordered:
        return []

    dense = rank_scores(np.array([e.score for e in ordered], dtype=float), tol=tol)[
        "dense"
    ]

    groups: list[list[ScoreEntry]] = []
    current_rank = None
    for entry, rank in zip(ordered, dense):
        if rank != current_rank:
            groups.append([])
            current_rank = rank
        groups[-1].append(entry)
    return groups


__all__ = [
    "DEFAULT_SCORING",
    "ScoreEntry",
    "Scoring",
    "rank_by_score",
]
