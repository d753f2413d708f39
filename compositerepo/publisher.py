"""
publisher.py

Responsibility: Write a rendered composite repository to disk and repoint `current`.

Layout produced under the output folder:

    <output>/<version>/compositeArtifacts.xml
    <output>/<version>/compositeContent.xml
    <output>/<version>/index.html
    <output>/current -> <version>
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import TextIO

from compositerepo.renderer import RenderedDocuments
from compositerepo.repository import CompositeRepository

_logger = logging.getLogger(__name__)

CURRENT_LINK = "current"


class PublishError(RuntimeError):
    pass


def _files(documents: RenderedDocuments) -> dict[str, str]:
    return {
        "compositeArtifacts.xml": documents.artifacts,
        "compositeContent.xml": documents.metadata,
        "index.html": documents.index_html,
    }


def _prepare_dir(path: Path) -> None:
    if path.is_symlink():
        raise PublishError(f"Refusing to publish into a symbolic link: {path}")
    if path.exists():
        _logger.warning("Removing the existing directory %s", path)
        shutil.rmtree(path)
    path.mkdir(parents=True)


def repoint_current(output_dir: Path, version: str) -> Path:
    """Point `<output_dir>/current` at the version folder `version`."""
    link = output_dir / CURRENT_LINK
    if link.is_symlink():
        link.unlink()
    elif link.exists():
        raise PublishError(f"{link} exists and is not a symbolic link")
    os.symlink(version, link, target_is_directory=True)
    return link


def publish(repository: CompositeRepository, documents: RenderedDocuments) -> Path:
    """Write the documents into the versioned output folder and return that folder."""
    out_dir = repository.versioned_output_dir
    _prepare_dir(out_dir)

    _logger.info("Writing the composite repository in %s", out_dir)
    for filename, content in _files(documents).items():
        (out_dir / filename).write_text(content, encoding="utf-8", newline="\n")

    link = repoint_current(repository.output_dir, repository.version)
    _logger.info("%s -> %s", link, repository.version)
    return out_dir


def dump(documents: RenderedDocuments, stream: TextIO) -> None:
    """Print the documents instead of writing them (dry run)."""
    for filename, content in _files(documents).items():
        stream.write(f"=== {filename}:\n")
        stream.write(content)
        if not content.endswith("\n"):
            stream.write("\n")
