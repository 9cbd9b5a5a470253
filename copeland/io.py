"""Reading ballots from text files.

A ballot file lists one name per line, most preferred first. Surrounding
whitespace is stripped and blank lines are ignored.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path


class BallotReadError(OSError):
    """Raised when ballot files cannot be found or read."""


def read_ballot(lines: Iterable[str], normalize_case: bool = True) -> list[str]:
    """Parse ballot lines into a list of names."""
    names = []
    for line in lines:
        name = line.strip()
        if not name:
            continue
        if normalize_case:
            name = name.upper()
        names.append(name)
    return names


def read_ballot_file(path: Path, normalize_case: bool = True) -> list[str]:
    # Undecodable bytes survive as surrogates and fail name lookup in the engine.
    try:
        with open(path, encoding="utf-8", errors="surrogateescape") as f:
            return read_ballot(f, normalize_case=normalize_case)
    except OSError as e:
        raise BallotReadError(f"ballot {str(path)!r} reading failed: {e}") from e


def _walk(path: Path, follow_symlinks: bool = False) -> Iterator[Path]:
    if path.is_symlink() and not follow_symlinks:
        return
    if path.is_dir():
        for child in sorted(path.iterdir()):
            yield from _walk(child)
    elif path.is_file():
        yield path


def iter_ballot_files(paths: Iterable[Path]) -> Iterator[Path]:
    """Yield regular files under each root, walking directories in lexical order.

    A root may itself be a symlink; symlinks found inside a directory are skipped.
    """
    for root in paths:
        root = Path(root)
        if not root.exists():
            raise BallotReadError(f"no such file or directory: {str(root)!r}")
        yield from _walk(root, follow_symlinks=True)


def first_ballot_file(paths: Iterable[Path]) -> Path:
    for path in iter_ballot_files(paths):
        return path
    raise BallotReadError("no files were found")


__all__ = [
    "BallotReadError",
    "first_ballot_file",
    "iter_ballot_files",
    "read_ballot",
    "read_ballot_file",
]
