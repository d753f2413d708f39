"""
compositerepo package

This package generates versioned p2 composite repositories as a CLI-first utility.

Key responsibilities are split across modules:
- `config.py`: load the run configuration (YAML file + CLI overrides)
- `scanner.py`: find the marker files that flag child repositories
- `versions.py`: version folder discovery and version increments
- `repository.py`: the state of one generation run and change detection
- `renderer.py`: render the XML descriptors and the HTML index from templates
- `publisher.py`: write the versioned output folder and repoint `current`
- `cli.py`: CLI entrypoint and orchestration (scan -> version -> render -> publish)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
