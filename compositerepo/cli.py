"""
cli.py

Responsibility: CLI entrypoint for the composite repository generator.

High-level flow (single command `generate`):
1) Load configuration -> `RunConfig`
2) Resolve the version and collect child repositories -> `CompositeRepository`
3) Stop when nothing changed since the last published version
4) Render the documents, then print them (dry run) or publish them

This module should orchestrate behavior but keep concerns isolated:
- Configuration: `config.py`
- Scanning: `scanner.py`
- Versions: `versions.py` / `repository.py`
- Rendering: `renderer.py`
- Writing: `publisher.py`
"""

from __future__ import annotations

import argparse
import logging
import sys

from compositerepo import __version__
from compositerepo.config import ConfigError, RunConfig, load_config
from compositerepo.publisher import PublishError, dump, publish
from compositerepo.renderer import RenderError, render_documents
from compositerepo.repository import CompositeRepository
from compositerepo.scanner import find_marker_files
from compositerepo.versions import VersionError

_logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNCHANGED = 1
EXIT_ERROR = 2


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _run_config(args: argparse.Namespace) -> RunConfig:
    config = load_config(args.config)
    return config.with_overrides(
        basefolder=args.basefolder,
        output=args.output,
        name=args.name,
        version=args.version,
        dry_run=True if args.test else None,
        templates_dir=args.templates_dir,
    )


def generate(config: RunConfig) -> int:
    """Run one generation. Returns the process exit code."""
    repository = CompositeRepository(config)
    _logger.info("Got %s", repository.versioned_output_dir)

    for marker in find_marker_files(config.basefolder, config.name, config.prune_dirs):
        repository.add_child(marker)

    if not repository.is_changed():
        _logger.info("No changes since %s", repository.previous_version)
        return EXIT_UNCHANGED

    documents = render_documents(repository, templates_dir=config.templates_dir)

    if config.dry_run:
        dump(documents, sys.stdout)
    else:
        publish(repository, documents)
    return EXIT_OK


def generate_cmd(args: argparse.Namespace) -> int:
    try:
        return generate(_run_config(args))
    except (ConfigError, VersionError, RenderError, PublishError, OSError) as e:
        _logger.error("%s", e)
        return EXIT_ERROR


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="composite-repo",
        description="Generate a versioned p2 composite repository from child repositories",
    )
    p.add_argument("--version-info", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate", help="Scan for child repositories and write the next composite version")
    g.add_argument("--basefolder", "-b", default=None, help="Folder scanned for marker files (default: .)")
    g.add_argument("--output", "-o", default=None, help="Folder holding the composite versions (default: <basefolder>/<name>)")
    g.add_argument("--name", "-n", default=None, help="Composite repository name (default: all)")
    g.add_argument("--version", "-v", default=None, help="Version to generate instead of the next one")
    g.add_argument("--test", "-t", action="store_true", help="Print the documents instead of writing them")
    g.add_argument("--config", default=None, help="YAML configuration file")
    g.add_argument("--templates-dir", default=None, help="Folder overriding the bundled templates")

    g.set_defaults(func=generate_cmd)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(bool(args.verbose))
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
