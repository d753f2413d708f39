"""
config.py

Responsibility: Load the run configuration from an optional YAML file and merge CLI overrides.

The configuration file is a plain YAML mapping, for example:

    basefolder: /srv/p2
    name: all
    prune_dirs: [plugins, features, binaries]

Every key is optional. Values given on the command line win over values from the file.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

DEFAULT_NAME = "all"
DEFAULT_PRUNE_DIRS: tuple[str, ...] = ("plugins", "features", "binaries")


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class RunConfig:
    """Everything a single generation run needs to know."""

    basefolder: Path = Path(".")
    output: Path | None = None
    name: str = DEFAULT_NAME
    version: str | None = None
    dry_run: bool = False
    templates_dir: Path | None = None
    prune_dirs: tuple[str, ...] = field(default=DEFAULT_PRUNE_DIRS)

    @property
    def output_dir(self) -> Path:
        """
        The folder holding the version folders of the composite repository.

        Defaults to `<basefolder>/<name>`, a directory the scanner never descends into.
        """
        if self.output is not None:
            return self.output
        return self.basefolder / self.name

    def with_overrides(self, **overrides: Any) -> "RunConfig":
        """Return a copy with every non-None override applied."""
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        values = {k: v for k, v in overrides.items() if v is not None}
        return _coerce(replace(self, **values))


def _coerce(config: RunConfig) -> RunConfig:
    if not isinstance(config.name, str):
        raise ConfigError("`name` must be a string (quote numeric names in YAML).")
    name = config.name.strip()
    if not name:
        raise ConfigError("`name` must not be empty.")
    version = config.version
    if version is not None:
        if not isinstance(version, str):
            raise ConfigError("`version` must be a string (quote it in YAML, e.g. version: \"2.10\").")
        version = version.strip() or None
    if not isinstance(config.dry_run, bool):
        raise ConfigError("`dry_run` must be true or false.")
    return replace(
        config,
        basefolder=Path(config.basefolder),
        output=Path(config.output) if config.output is not None else None,
        name=name,
        version=version,
        dry_run=config.dry_run,
        templates_dir=Path(config.templates_dir) if config.templates_dir is not None else None,
        prune_dirs=tuple(str(d) for d in config.prune_dirs),
    )


def load_config(config_path: str | Path | None) -> RunConfig:
    """
    Load a `RunConfig` from a YAML file, or return the defaults when no path is given.

    Recognised keys: basefolder, output, name, version, dry_run, templates_dir, prune_dirs.
    """
    if config_path is None:
        return RunConfig()

    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Config file does not exist: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file is not valid YAML: {path}") from e
    if not isinstance(data, dict):
        raise ConfigError("Config file must be a mapping/object at the top level.")

    prune_raw = data.get("prune_dirs")
    if prune_raw is not None:
        if not isinstance(prune_raw, list):
            raise ConfigError("`prune_dirs` must be a list when provided.")
        data["prune_dirs"] = tuple(prune_raw)

    # Relative paths in the file are resolved against the file's folder.
    for key in ("basefolder", "output", "templates_dir"):
        if data.get(key) is not None:
            data[key] = path.parent / str(data[key])

    return RunConfig().with_overrides(**data)
