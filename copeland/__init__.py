"""Copeland package for pairwise ranking of ranked-preference ballots.

Modules
------------------
- ``copeland.tally`` provides the tally engine: pairwise count matrix,
  ballot validation, Copeland scoring and rank grouping.
- ``copeland.utils`` provides rank variants for score vectors.
- ``copeland.io`` reads ballot files and walks ballot directories.
- ``copeland.config`` holds the command-line configuration model.
- ``copeland.cli`` is the ``copeland`` command-line tool.

"""

__version__ = "0.1.0"

from . import tally, utils

__all__ = ["tally", "utils"]
