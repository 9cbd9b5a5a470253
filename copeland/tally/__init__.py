"""
Copeland pairwise tally.

Input Format
------------
The engine is constructed from a list of alternative names. Names are
copied, sorted and deduplicated; at least two distinct names are required.

Each ballot is a sequence of names ordered from most to least preferred,
listing every registered alternative exactly once (a strict total order).

Output Format
-------------
- ``Copeland.score()`` returns one ``ScoreEntry(name, score)`` per
  alternative, in sorted name order.
- ``rank_by_score()`` turns score entries into rank groups: a list of lists
  ordered from best to worst, each group holding entries with equal score,
  ordered by name.
- ``copeland_rank()`` runs a whole batch and returns a rank array, or
  ``(ranking, scores)`` with ``return_scores=True``.

Scoring
-------
For every other alternative ``j``, alternative ``i`` earns ``win`` if more
ballots rank ``i`` above ``j`` than the reverse, ``loss`` if fewer, and
``tie`` if equal. The default rule is ``win=1, tie=0.5, loss=0``.

Examples
--------
>>> from copeland.tally import Copeland, Scoring, rank_by_score
>>> engine = Copeland(["A", "B", "C"])
>>> engine.update(["A", "B", "C"])
>>> engine.update(["B", "A", "C"])
>>> groups = rank_by_score(engine.score())
>>> [[e.name for e in g] for g in groups]
[['A', 'B'], ['C']]
>>> [e.score for e in engine.score(Scoring(win=3, tie=1, loss=0))]
[4.0, 4.0, 0.0]
"""

from ._matrix import PairwiseMatrix
from .engine import Copeland
from .errors import BallotError, BallotErrorKind, InsufficientAlternativesError
from .scoring import DEFAULT_SCORING, ScoreEntry, Scoring, rank_by_score
from .voting import copeland_rank

__all__ = [
    # Engine
    "Copeland",
    "PairwiseMatrix",
    # Scoring
    "Scoring",
    "ScoreEntry",
    "DEFAULT_SCORING",
    "rank_by_score",
    "copeland_rank",
    # Errors
    "BallotError",
    "BallotErrorKind",
    "InsufficientAlternativesError",
]
