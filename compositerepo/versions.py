"""
versions.py

Responsibility: Everything about version folders.

- find the latest version folder under a parent directory
- compute the next version of the composite repository
- read back the children listed by a previously published composite repository
"""

from __future__ import annotations

import fnmatch
import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path

_logger = logging.getLogger(__name__)

FIRST_VERSION = "1.0.0.000"
ARTIFACTS_FILE = "compositeArtifacts.xml"

# A folder counts as a version folder when it holds one of these files.
VERSION_FOLDER_MARKERS = ("artifacts.*", "compositeArtifacts.*", "dummy")

_NUMERIC = re.compile(r"^\d+$")


class VersionError(ValueError):
    pass


def version_key(version: str) -> tuple[tuple[int, int | str], ...]:
    """
    Sort key comparing dot separated numeric components as integers.

    Numeric components sort before textual ones at the same position.
    """
    parts: list[tuple[int, int | str]] = []
    for tok in version.split("."):
        if _NUMERIC.match(tok):
            parts.append((0, int(tok)))
        else:
            parts.append((1, tok))
    return tuple(parts)


def is_version_folder(path: Path) -> bool:
    if not path.is_dir() or path.is_symlink():
        return False
    for child in path.iterdir():
        if child.is_file() and any(fnmatch.fnmatchcase(child.name, pat) for pat in VERSION_FOLDER_MARKERS):
            return True
    return False


def list_versions(parent_dir: str | Path) -> list[str]:
    """Return the version folder names under `parent_dir`, oldest first."""
    parent = Path(parent_dir)
    if not parent.is_dir():
        return []
    names = [p.name for p in parent.iterdir() if is_version_folder(p)]
    return sorted(names, key=version_key)


def last_version(parent_dir: str | Path) -> str | None:
    """Return the latest version folder name under `parent_dir`, or None."""
    versions = list_versions(parent_dir)
    return versions[-1] if versions else None


def increment_version(version: str) -> str:
    """
    Increment the last component of a dotted version, keeping its zero padding.

    >>> increment_version("1.0.0.019")
    '1.0.0.020'
    """
    head, _sep, build = version.rpartition(".")
    if not _NUMERIC.match(build):
        raise VersionError(f"Cannot increment version {version!r}: last component is not numeric")
    bumped = str(int(build) + 1).rjust(len(build), "0")
    return f"{head}.{bumped}" if head else bumped


def read_released_children(version_dir: str | Path) -> list[str]:
    """
    Return the sorted child locations of a published composite repository.

    A missing `compositeArtifacts.xml` yields an empty list.
    """
    artifacts = Path(version_dir) / ARTIFACTS_FILE
    if not artifacts.is_file():
        _logger.warning("%s does not exist", artifacts)
        return []
    try:
        tree = ET.parse(artifacts)
    except ET.ParseError as e:
        raise VersionError(f"Cannot parse {artifacts}: {e}") from e

    children = []
    for child in tree.getroot().iter("child"):
        location = child.get("location")
        if location:
            _logger.debug("Released child %s", location)
            children.append(location)
    return sorted(children)
