"""Tests for the marker file scanner."""

from pathlib import Path

import pytest

from compositerepo.scanner import find_marker_files, marker_file_name


def _touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("")


def test_marker_file_name_is_lower_case() -> None:
    assert marker_file_name("All") == "all.composite.mkrepo"


def test_finds_markers_case_insensitively(tmp_path: Path) -> None:
    _touch(tmp_path / "a" / "all.composite.mkrepo")
    _touch(tmp_path / "b" / "c" / "ALL.Composite.MkRepo")
    _touch(tmp_path / "d" / "other.composite.mkrepo")

    found = find_marker_files(tmp_path, "all")
    assert [p.parent.name for p in found] == ["a", "c"]


def test_prunes_hidden_named_and_listed_dirs(tmp_path: Path) -> None:
    _touch(tmp_path / "keep" / "all.composite.mkrepo")
    _touch(tmp_path / ".git" / "all.composite.mkrepo")
    _touch(tmp_path / "all" / "x" / "all.composite.mkrepo")
    _touch(tmp_path / "keep" / "plugins" / "all.composite.mkrepo")
    _touch(tmp_path / "features" / "all.composite.mkrepo")

    found = find_marker_files(tmp_path, "all", prune_dirs=("plugins", "features", "binaries"))
    assert found == [tmp_path / "keep" / "all.composite.mkrepo"]


def test_marker_directory_is_not_a_marker(tmp_path: Path) -> None:
    (tmp_path / "all.composite.mkrepo").mkdir()
    assert find_marker_files(tmp_path, "all") == []


def test_missing_basefolder(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        find_marker_files(tmp_path / "nope", "all")
