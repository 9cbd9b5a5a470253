"""Configuration for a command-line tally run."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, field_validator

from copeland.tally import Scoring


class TallyConfig(BaseModel):
    """Settings collected from command-line flags.

    Attributes:
        names_path: File listing the alternatives. If None, the first ballot
            file found is used.
        normalize_case: Upper-case every name read from files.
        score_win: Weight for a head-to-head win.
        score_tie: Weight for a head-to-head tie.
        score_loss: Weight for a head-to-head loss.
        skip_errors: Report invalid ballots and keep going instead of aborting.
        rank_style: Rank numbering printed for each group.
    """

    names_path: Path | None = None
    normalize_case: bool = True
    score_win: float = 1.0
    score_tie: float = 0.5
    score_loss: float = 0.0
    skip_errors: bool = False
    rank_style: Literal["dense", "competition"] = "dense"

    @field_validator("score_win", "score_tie", "score_loss")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("score weights must be finite")
        return v

    def scoring(self) -> Scoring:
        return Scoring(win=self.score_win, tie=self.score_tie, loss=self.score_loss)
