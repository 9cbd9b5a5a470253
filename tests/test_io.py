from __future__ import annotations

import io
from pathlib import Path

import pytest

from copeland.io import (
    BallotReadError,
    first_ballot_file,
    iter_ballot_files,
    read_ballot,
    read_ballot_file,
)


class TestReadBallot:
    def test_strips_and_skips_blank_lines(self) -> None:
        lines = io.StringIO("  alice \n\n\t\nbob\n   \ncarol")
        assert read_ballot(lines) == ["ALICE", "BOB", "CAROL"]

    def test_case_preserved_when_disabled(self) -> None:
        assert read_ballot(["Alice\n", "bob\n"], normalize_case=False) == ["Alice", "bob"]

    def test_duplicates_kept(self) -> None:
        assert read_ballot(["a", "A"]) == ["A", "A"]

    def test_empty(self) -> None:
        assert read_ballot([]) == []


class TestFiles:
    def test_read_ballot_file(self, tmp_path: Path, write_ballot) -> None:
        path = write_ballot(tmp_path / "b.txt", ["x", "", "y"])
        assert read_ballot_file(path) == ["X", "Y"]

    def test_read_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(BallotReadError, match="reading failed"):
            read_ballot_file(tmp_path / "missing.txt")

    def test_iter_walks_directories_in_lexical_order(self, ballot_dir: Path) -> None:
        files = [p.relative_to(ballot_dir).as_posix() for p in iter_ballot_files([ballot_dir])]
        assert files == ["01.txt", "02.txt", "nested/03.txt"]

    def test_iter_keeps_root_order(self, ballot_dir: Path) -> None:
        second = ballot_dir / "02.txt"
        files = list(iter_ballot_files([second, ballot_dir / "nested"]))
        assert files == [second, ballot_dir / "nested" / "03.txt"]

    def test_iter_missing_root(self, tmp_path: Path) -> None:
        with pytest.raises(BallotReadError, match="no such file"):
            list(iter_ballot_files([tmp_path / "nope"]))

    def test_first_ballot_file(self, ballot_dir: Path) -> None:
        assert first_ballot_file([ballot_dir]) == ballot_dir / "01.txt"

    def test_first_ballot_file_skips_empty_dirs(self, tmp_path: Path, ballot_dir: Path) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()
        assert first_ballot_file([empty, ballot_dir]) == ballot_dir / "01.txt"

    def test_no_files_found(self, tmp_path: Path) -> None:
        with pytest.raises(BallotReadError, match="no files were found"):
            first_ballot_file([tmp_path])

    def test_read_undecodable_bytes(self, tmp_path: Path) -> None:
        path = tmp_path / "b.bin"
        path.write_bytes(b"\xff\xfe\n\x80\n")
        names = read_ballot_file(path)
        assert len(names) == 2
        assert "A" not in names


class TestSymlinks:
    def test_symlinked_file_skipped(self, tmp_path: Path, write_ballot) -> None:
        root = tmp_path / "ballots"
        target = write_ballot(tmp_path / "outside.txt", ["a", "b"])
        write_ballot(root / "1.txt", ["a", "b"])
        (root / "2.txt").symlink_to(target)

        assert list(iter_ballot_files([root])) == [root / "1.txt"]

    def test_directory_loop_walked_once(self, tmp_path: Path, write_ballot) -> None:
        root = tmp_path / "ballots"
        write_ballot(root / "1.txt", ["a", "b"])
        (root / "loop").symlink_to(root, target_is_directory=True)

        assert list(iter_ballot_files([root])) == [root / "1.txt"]

    def test_symlinked_root_followed(self, tmp_path: Path, ballot_dir: Path) -> None:
        link = tmp_path / "link"
        link.symlink_to(ballot_dir, target_is_directory=True)

        files = [p.relative_to(link).as_posix() for p in iter_ballot_files([link])]
        assert files == ["01.txt", "02.txt", "nested/03.txt"]
