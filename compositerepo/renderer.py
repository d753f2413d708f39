"""
renderer.py

Responsibility: Render the composite repository documents from Jinja2 templates.

Rules:
- One composite template produces both p2 documents; `kind` selects
  the artifact or the metadata flavour.
- Templates ship with the package; a templates directory may override them.
- Undefined template variables are errors, never empty strings.

This module intentionally does NOT write files or know about CLI parsing.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape

from compositerepo.repository import CompositeRepository

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

COMPOSITE_TEMPLATE = "composite.xml.j2"
INDEX_TEMPLATE = "index.html.j2"

# p2 repository flavours keyed by `kind`.
REPOSITORY_TYPES = {
    "Artifact": "org.eclipse.equinox.internal.p2.artifact.repository.CompositeArtifactRepository",
    "Metadata": "org.eclipse.equinox.internal.p2.metadata.repository.CompositeMetadataRepository",
}


class RenderError(RuntimeError):
    pass


@dataclass(frozen=True)
class RenderedDocuments:
    artifacts: str
    metadata: str
    index_html: str


def _environment(templates_dir: Path) -> Environment:
    if not templates_dir.is_dir():
        raise RenderError(f"Template directory not found: {templates_dir}")
    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def build_context(repository: CompositeRepository) -> dict[str, Any]:
    # Names available to every template.
    return {
        "name": repository.name,
        "version": repository.version,
        "previous_version": repository.previous_version,
        "children": list(repository.children),
        "timestamp": repository.timestamp,
        "date": repository.date.strftime("%Y-%m-%d %H:%M:%S UTC"),
    }


def _render(env: Environment, template_name: str, context: dict[str, Any]) -> str:
    try:
        return env.get_template(template_name).render(**context)
    except TemplateError as e:
        raise RenderError(f"Failed rendering template: {template_name}: {e}") from e


def render_documents(
    repository: CompositeRepository,
    *,
    templates_dir: str | Path | None = None,
) -> RenderedDocuments:
    """Render compositeArtifacts.xml, compositeContent.xml and index.html for `repository`."""
    env = _environment(Path(templates_dir) if templates_dir is not None else DEFAULT_TEMPLATES_DIR)
    context = build_context(repository)

    docs = {}
    for kind, repo_type in REPOSITORY_TYPES.items():
        docs[kind] = _render(env, COMPOSITE_TEMPLATE, {**context, "kind": kind, "repository_type": repo_type})

    return RenderedDocuments(
        artifacts=docs["Artifact"],
        metadata=docs["Metadata"],
        index_html=_render(env, INDEX_TEMPLATE, context),
    )
