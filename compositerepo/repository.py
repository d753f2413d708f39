"""
repository.py

Responsibility: Hold the state of one composite repository generation run.

The `CompositeRepository` resolves the version being produced, collects the
child repositories and decides whether anything changed since the version
that was last published. It does not touch the filesystem beyond reading.
"""

from __future__ import annotations

import logging
import os
import time
from datetime import datetime, timezone
from pathlib import Path, PurePosixPath

from compositerepo.config import RunConfig
from compositerepo.versions import FIRST_VERSION, increment_version, last_version, read_released_children

_logger = logging.getLogger(__name__)


def _absolute(path: str | Path) -> Path:
    # Symlinks are kept: locations must hold for the published (served) layout.
    return Path(os.path.abspath(os.path.expanduser(path)))


class CompositeRepository:
    def __init__(self, config: RunConfig) -> None:
        self.config = config
        self.name = config.name
        self.output_dir = _absolute(config.output_dir)

        # Locations relative to the versioned output dir, e.g. "../../be/3.0.0.178".
        self.children: list[str] = []
        # Children listed by the last published version; empty when unknown.
        self.released_children: list[str] = []

        now = time.time()
        self.timestamp = int(now * 1000)
        self.date = datetime.fromtimestamp(now, tz=timezone.utc)

        self.previous_version: str | None = None
        self.version = self._resolve_version(config.version)
        _logger.info("Composite repository %s version %s", self.name, self.version)

    def _resolve_version(self, supplied: str | None) -> str:
        if supplied:
            return supplied
        latest = last_version(self.output_dir)
        if latest is None:
            return FIRST_VERSION
        self.previous_version = latest
        self.released_children = read_released_children(self.output_dir / latest)
        return increment_version(latest)

    @property
    def versioned_output_dir(self) -> Path:
        return self.output_dir / self.version

    def add_child(self, marker_path: str | Path) -> str | None:
        """
        Register the child repository flagged by `marker_path`.

        Returns the recorded location, or None when the child has no version folder yet.
        """
        folder = _absolute(marker_path).parent
        version = last_version(folder)
        if version is None:
            _logger.warning("Skipping %s: no version folder found", folder)
            return None
        relative = os.path.relpath(folder, self.versioned_output_dir)
        location = str(PurePosixPath(*Path(relative).parts, version))
        _logger.info("Adding child %s", location)
        self.children.append(location)
        self.children.sort()
        return location

    def is_changed(self) -> bool:
        return not self.released_children or self.released_children != sorted(self.children)
