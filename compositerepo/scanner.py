"""
scanner.py

Responsibility: Find the marker files that flag child repositories of a composite repository.

A folder takes part in the composite `<name>` when it contains a file called
`<name>.composite.mkrepo` (compared case-insensitively). Its version folders sit
beside the marker.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

_logger = logging.getLogger(__name__)

MARKER_SUFFIX = ".composite.mkrepo"


def marker_file_name(name: str) -> str:
    return f"{name.lower()}{MARKER_SUFFIX}"


def _should_prune(dirname: str, *, name: str, prune_dirs: Iterable[str]) -> bool:
    if dirname.startswith("."):
        return True
    return dirname == name or dirname in prune_dirs


def find_marker_files(basefolder: str | Path, name: str, prune_dirs: Iterable[str] = ()) -> list[Path]:
    """
    Walk `basefolder` and return every marker file for the composite `name`.

    Hidden folders, folders listed in `prune_dirs` and the folder named like the
    composite itself are not descended into. Results are in walk order with
    sorted siblings, so repeated runs see the same sequence.
    """
    root = Path(basefolder)
    if not root.is_dir():
        raise FileNotFoundError(f"Base folder not found: {root}")

    wanted = marker_file_name(name)
    pruned = frozenset(prune_dirs)
    markers: list[Path] = []

    for current, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if not _should_prune(d, name=name, prune_dirs=pruned))
        for filename in sorted(filenames):
            if filename.lower() != wanted:
                continue
            path = Path(current) / filename
            if path.is_file():
                _logger.debug("Found marker %s", path)
                markers.append(path)

    return markers
