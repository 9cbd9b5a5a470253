"""
One-shot Copeland ranking.

``copeland_rank`` wraps the engine for callers that already hold every
ballot in memory and want a rank array, mirroring the ``(ranking, scores)``
convention of array-based ranking functions.
"""

from collections.abc import Iterable

import numpy as np

from copeland.utils import RANK_VARIANTS, rank_scores

from ._types import Ballot, RankMethod, RankResult
from .engine import Copeland
from .scoring import Scoring


def copeland_rank(
    names: Iterable[str],
    ballots: Iterable[Ballot],
    scoring: Scoring | None = None,
    method: RankMethod = "competition",
    return_scores: bool = False,
) -> RankResult:
    """
    Rank alternatives by Copeland score over a batch of ballots.

    Args:
        names: Alternative names (sorted and deduplicated internally).
        ballots: Complete strict rankings, most preferred first.
        scoring: Win/tie/loss weights. ``None`` uses the default rule.
        method: Rank variant from :func:`copeland.utils.rank_scores`.
        return_scores: If ``True``, return ``(ranking, scores)``.

    Returns:
        Ranking array aligned with the sorted alternative names.
        If ``return_scores=True``, also returns the Copeland scores.

    Raises:
        ValueError: If ``method`` is unknown.
        InsufficientAlternativesError: If fewer than two distinct names.
        BallotError: On the first invalid ballot.

    Formula:
        .. math::
            s_i = \\sum_{j \\neq i} \\begin{cases}
            w_{win} & W_{ij} > W_{ji} \\\\
            w_{tie} & W_{ij} = W_{ji} \\\\
            w_{loss} & W_{ij} < W_{ji}
            \\end{cases}

        where :math:`W_{ij}` counts ballots ranking ``i`` above ``j``.

    Examples:
        >>> ranks, scores = copeland_rank(
        ...     ["A", "B", "C"],
        ...     [["A", "B", "C"], ["B", "A", "C"]],
        ...     return_scores=True,
        ... )
        >>> ranks.tolist()
        [1, 1, 3]
        >>> scores.tolist()
        [1.5, 1.5, 0.0]
    """
    if method not in RANK_VARIANTS:
        raise ValueError(f"method must be one of {RANK_VARIANTS}, got {method!r}")

    engine = Copeland(names)
    for ballot in ballots:
        engine.update(ballot)

    scores = np.array([entry.score for entry in engine.score(scoring)], dtype=float)
    ranking = rank_scores(scores)[method]

    return (ranking, scores) if return_scores else ranking


__all__ = ["copeland_rank"]
