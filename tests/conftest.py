from pathlib import Path

import pytest


def make_version(parent: Path, version: str, marker: str = "artifacts.jar") -> Path:
    folder = parent / version
    folder.mkdir(parents=True)
    (folder / marker).write_text("")
    return folder


def make_child(root: Path, rel: str, versions: list[str], name: str = "all") -> Path:
    folder = root / rel
    folder.mkdir(parents=True)
    (folder / f"{name}.composite.mkrepo").write_text("")
    for v in versions:
        make_version(folder, v)
    return folder


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """A base folder with two child repositories and an empty output folder."""
    root = tmp_path / "repos"
    make_child(root, "be", ["3.0.0.177", "3.0.0.178"])
    make_child(root, "fe/ui", ["1.2.0.009", "1.2.0.010"])
    (root / "all").mkdir()
    return root
