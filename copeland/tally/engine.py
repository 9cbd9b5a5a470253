"""
Copeland tally engine.

The engine registers a fixed set of alternatives, folds ballots into a
pairwise count matrix one at a time, and reduces the matrix to Copeland
scores on request.

Notes:
    The engine holds mutable state and does no locking. Callers that share
    one engine between threads must serialize ``update`` and ``score``.
"""

from bisect import bisect_left
from collections.abc import Iterable

import numpy as np

from ._matrix import PairwiseMatrix
from ._types import Ballot
from .errors import BallotError, InsufficientAlternativesError
from .scoring import DEFAULT_SCORING, ScoreEntry, Scoring


class Copeland:
    """
    Accumulate ranked ballots and compute Copeland scores.

    Args:
        names: Alternative names. Copied, sorted and deduplicated; the
            result is the alternative set for the lifetime of the engine.

    Raises:
        InsufficientAlternativesError: If fewer than two distinct names remain.

    Examples:
        >>> engine = Copeland(["C", "A", "B"])
        >>> engine.update(["A", "B", "C"])
        >>> [(e.name, e.score) for e in engine.score()]
        [('A', 2.0), ('B', 1.0), ('C', 0.0)]
    """

    def __init__(self, names: Iterable[str]):
        unique = tuple(sorted(set(names)))
        if len(unique) < 2:
            raise InsufficientAlternativesError(len(unique))
        self._names = unique
        self._state = PairwiseMatrix(len(unique))
        self._ballot_count = 0

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    @property
    def size(self) -> int:
        return len(self._names)

    @property
    def ballot_count(self) -> int:
        """Number of ballots accepted so far."""
        return self._ballot_count

    def pairwise_counts(self) -> np.ndarray:
        """Return a copy of the pairwise count matrix in ``names`` order."""
        return self._state.to_array()

    def _name_to_index(self, name: str) -> int | None:
        idx = bisect_left(self._names, name)
        if idx < len(self._names) and self._names[idx] == name:
            return idx
        return None

    def _ballot_to_matrix(self, ballot: Ballot) -> PairwiseMatrix:
        size = self.size
        if len(ballot) != size:
            raise BallotError.incorrect_length(expected=size, actual=len(ballot))

        mapped = []
        for name in ballot:
            idx = self._name_to_index(name)
            if idx is None:
                raise BallotError.unknown_name(name)
            mapped.append(idx)

        counts = np.bincount(mapped, minlength=size)
        for idx, count in enumerate(counts):
            if count == 0:
                raise BallotError.missing_name(self._names[idx])
            if count > 1:
                raise BallotError.duplicate_name(self._names[idx], int(count))

        contribution = PairwiseMatrix(size)
        for base, winner in enumerate(mapped):
            for loser in mapped[base + 1 :]:
                contribution.increment(winner, loser)
        return contribution

    def update(self, ballot: Ballot) -> None:
        """
        Validate one ballot and fold its pairwise outcomes into the tally.

        Args:
            ballot: Names from most to least preferred. Must list every
                registered alternative exactly once.

        Raises:
            BallotError: If the ballot is invalid. The tally is left unchanged.
        """
        try:
            contribution = self._ballot_to_matrix(ballot)
        except BallotError as err:
            raise err.with_context("state update failed") from err
        self._state.add(contribution)
        self._ballot_count += 1

    def score(self, scoring: Scoring | None = None) -> list[ScoreEntry]:
        """
        Compute Copeland scores from the current tally.

        Args:
            scoring: Win/tie/loss weights. ``None`` uses ``DEFAULT_SCORING``.

        Returns:
            One entry per alternative, in ``names`` order.

        Notes:
            A pair that was never compared counts as a tie.
        """
        if scoring is None:
            scoring = DEFAULT_SCORING

        size = self.size
        result = []
        for i in range(size):
            score = 0.0
            for j in range(size):
                if i == j:
                    continue
                runner = self._state.get(i, j)
                opponent = self._state.get(j, i)
                if runner > opponent:
                    score += scoring.win
                elif runner < opponent:
                    score += scoring.loss
                else:
                    score += scoring.tie
            result.append(ScoreEntry(self._names[i], score))
        return result

    def __repr__(self):
        return f"Copeland(names={list(self._names)!r}, ballots={self._ballot_count})"


__all__ = ["Copeland"]
