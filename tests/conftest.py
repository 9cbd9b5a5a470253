from __future__ import annotations

from pathlib import Path

import pytest


def _write_ballot(path: Path, names: list[str]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(names) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def write_ballot():
    return _write_ballot


@pytest.fixture
def ballot_dir(tmp_path: Path) -> Path:
    """Three ballots over a, b, c: a wins everything, b beats c."""
    root = tmp_path / "ballots"
    _write_ballot(root / "01.txt", ["a", "b", "c"])
    _write_ballot(root / "02.txt", ["b", "a", "c"])
    _write_ballot(root / "nested" / "03.txt", ["a", "c", "b"])
    return root
