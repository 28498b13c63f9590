from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from src.app_schematic.architect import app_project_descriptor, e2e_project_descriptor
from src.app_schematic.options import AppOptions, NormalizedOptions, normalize_options
from src.app_schematic.templates import render_project_files
from src.workspace.config import GeneratorSettings, load_settings
from src.workspace.manifests import (
    add_project_tags,
    add_workspace_projects,
    ensure_projects_absent,
    read_json_in_tree,
    serialize_json,
)
from src.workspace.tree import VirtualTree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    files: dict[str, str]
    manifests: dict[str, dict[str, Any]]
    app_project: str
    e2e_project: str
    warnings: list[str] = field(default_factory=list)

    def manifest_texts(self) -> dict[str, str]:
        return {path: serialize_json(doc) for path, doc in self.manifests.items()}


def generate_app(
    options: AppOptions | Mapping[str, Any],
    *,
    workspace_manifest: dict[str, Any],
    tags_manifest: dict[str, Any],
    settings: GeneratorSettings | None = None,
) -> GenerationResult:
    """Compute the files and manifest updates for a new app + e2e pair.

    No files are read or written and the given manifests are left as they
    are; only the APPGEN_* environment is consulted when *settings* is None.
    Raises InvalidOptionsError for bad options and
    ProjectExistsError when either project name is already taken.
    """
    settings = settings or load_settings()
    opts = normalize_options(options, settings)
    names = opts.names
    project_names = (names.project_name, names.e2e_project_name)

    # Check both manifests before doing any rendering work.
    ensure_projects_absent(
        workspace_manifest, project_names, source=settings.workspace_manifest
    )
    ensure_projects_absent(tags_manifest, project_names, source=settings.tags_manifest)

    files = _render_files(opts)

    workspace = add_workspace_projects(
        workspace_manifest,
        [
            (names.project_name, app_project_descriptor(opts)),
            (names.e2e_project_name, e2e_project_descriptor(opts)),
        ],
        source=settings.workspace_manifest,
    )
    tags = add_project_tags(
        tags_manifest,
        [
            (names.project_name, list(opts.parsed_tags)),
            (names.e2e_project_name, []),
        ],
        source=settings.tags_manifest,
    )

    warnings: list[str] = []
    if "npmScope" not in tags_manifest:
        warnings.append(f"{settings.tags_manifest} has no npmScope")

    logger.info(
        "Generated %s (%d files) at %s and %s at %s",
        names.project_name,
        len(files),
        names.project_root,
        names.e2e_project_name,
        names.e2e_project_root,
    )
    return GenerationResult(
        files=files,
        manifests={
            settings.workspace_manifest: workspace,
            settings.tags_manifest: tags,
        },
        app_project=names.project_name,
        e2e_project=names.e2e_project_name,
        warnings=warnings,
    )


def _render_files(opts: NormalizedOptions) -> dict[str, str]:
    files = render_project_files("app", opts, opts.names.project_root)
    e2e = render_project_files("e2e", opts, opts.names.e2e_project_root)
    dupes = set(files) & set(e2e)
    if dupes:
        raise RuntimeError(f"duplicate generated paths: {sorted(dupes)}")
    files.update(e2e)
    return files


def apply_result(tree: VirtualTree, result: GenerationResult) -> VirtualTree:
    """Return a copy of *tree* with *result* merged in."""
    out = tree.copy()
    for path, content in result.files.items():
        out.create(path, content)
    for path, text in result.manifest_texts().items():
        if out.exists(path):
            out.overwrite(path, text)
        else:
            out.create(path, text)
    return out


def run_app_schematic(
    tree: VirtualTree,
    options: AppOptions | Mapping[str, Any],
    *,
    settings: GeneratorSettings | None = None,
) -> VirtualTree:
    """Run the app generator against a tree that holds both manifests."""
    settings = settings or load_settings()
    result = generate_app(
        options,
        workspace_manifest=read_json_in_tree(tree, settings.workspace_manifest),
        tags_manifest=read_json_in_tree(tree, settings.tags_manifest),
        settings=settings,
    )
    for w in result.warnings:
        logger.warning("%s", w)
    return apply_result(tree, result)
