"""Tests for configuration loading."""

from pathlib import Path

import pytest

from compositerepo.config import DEFAULT_PRUNE_DIRS, ConfigError, RunConfig, load_config


def test_defaults() -> None:
    config = load_config(None)
    assert config.name == "all"
    assert config.version is None
    assert config.dry_run is False
    assert config.prune_dirs == DEFAULT_PRUNE_DIRS
    assert config.output_dir == Path(".") / "all"


def test_yaml_file_and_relative_paths(tmp_path: Path) -> None:
    cfg = tmp_path / "composite.yml"
    cfg.write_text("basefolder: repos\nname: release\nprune_dirs: [plugins]\nversion: 2.0.0.000\n")
    config = load_config(cfg)
    assert config.basefolder == tmp_path / "repos"
    assert config.name == "release"
    assert config.version == "2.0.0.000"
    assert config.prune_dirs == ("plugins",)
    assert config.output_dir == tmp_path / "repos" / "release"


def test_overrides_skip_none() -> None:
    config = RunConfig(name="base").with_overrides(name=None, output="out", dry_run=True)
    assert config.name == "base"
    assert config.output == Path("out")
    assert config.dry_run is True


def test_rejects_unknown_keys(tmp_path: Path) -> None:
    cfg = tmp_path / "composite.yml"
    cfg.write_text("colour: blue\n")
    with pytest.raises(ConfigError):
        load_config(cfg)


def test_rejects_non_mapping(tmp_path: Path) -> None:
    cfg = tmp_path / "composite.yml"
    cfg.write_text("- a\n- b\n")
    with pytest.raises(ConfigError):
        load_config(cfg)


def test_rejects_bad_prune_dirs(tmp_path: Path) -> None:
    cfg = tmp_path / "composite.yml"
    cfg.write_text("prune_dirs: plugins\n")
    with pytest.raises(ConfigError):
        load_config(cfg)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yml")


def test_empty_name_rejected() -> None:
    with pytest.raises(ConfigError):
        RunConfig().with_overrides(name="  ")


def test_unquoted_numeric_version_rejected(tmp_path: Path) -> None:
    cfg = tmp_path / "composite.yml"
    cfg.write_text("version: 2.10\n")
    with pytest.raises(ConfigError):
        load_config(cfg)


def test_quoted_version_kept_verbatim(tmp_path: Path) -> None:
    cfg = tmp_path / "composite.yml"
    cfg.write_text('version: "2.10"\n')
    assert load_config(cfg).version == "2.10"


def test_numeric_name_rejected(tmp_path: Path) -> None:
    cfg = tmp_path / "composite.yml"
    cfg.write_text("name: 42\n")
    with pytest.raises(ConfigError):
        load_config(cfg)


def test_string_dry_run_rejected(tmp_path: Path) -> None:
    cfg = tmp_path / "composite.yml"
    cfg.write_text('dry_run: "false"\n')
    with pytest.raises(ConfigError):
        load_config(cfg)


def test_boolean_dry_run(tmp_path: Path) -> None:
    cfg = tmp_path / "composite.yml"
    cfg.write_text("dry_run: true\n")
    assert load_config(cfg).dry_run is True
