from __future__ import annotations

import copy
import json
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable

    from src.workspace.tree import VirtualTree

logger = logging.getLogger(__name__)


class ManifestError(RuntimeError):
    pass


class ManifestReadError(ManifestError):
    pass


class ProjectExistsError(ManifestError):
    def __init__(self, project_name: str, manifest: str) -> None:
        super().__init__(f"project {project_name!r} already exists in {manifest}")
        self.project_name = project_name
        self.manifest = manifest


def parse_json_document(text: str, *, source: str) -> dict[str, Any]:
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestReadError(f"malformed JSON in {source}: {exc}") from exc
    if not isinstance(doc, dict):
        raise ManifestReadError(f"{source} must contain a JSON object")
    return doc


def read_json_in_tree(tree: VirtualTree, path: str) -> dict[str, Any]:
    """Read a JSON object from the tree; every failure is fatal."""
    try:
        text = tree.read(path)
    except FileNotFoundError as exc:
        raise ManifestReadError(f"{path} does not exist") from exc
    return parse_json_document(text, source=path)


def serialize_json(doc: dict[str, Any]) -> str:
    return json.dumps(doc, indent=2, ensure_ascii=False) + "\n"


def _projects_of(doc: dict[str, Any], *, source: str) -> dict[str, Any]:
    projects = doc.get("projects")
    if projects is None:
        return {}
    if not isinstance(projects, dict):
        raise ManifestReadError(f"'projects' in {source} must be an object")
    return projects


def ensure_projects_absent(
    doc: dict[str, Any], names: Iterable[str], *, source: str
) -> None:
    projects = _projects_of(doc, source=source)
    for name in names:
        if name in projects:
            raise ProjectExistsError(name, source)


def add_projects(
    doc: dict[str, Any],
    entries: Iterable[tuple[str, dict[str, Any]]],
    *,
    source: str,
) -> dict[str, Any]:
    """Return a copy of *doc* with *entries* appended under 'projects'.

    Existing entries are carried over untouched; inserting a name that is
    already present raises ProjectExistsError.
    """
    entries = list(entries)
    ensure_projects_absent(doc, (name for name, _ in entries), source=source)

    out = copy.deepcopy(doc)
    projects = dict(_projects_of(out, source=source))
    for name, descriptor in entries:
        projects[name] = copy.deepcopy(descriptor)
        logger.debug("Adding project %s to %s", name, source)
    out["projects"] = projects
    return out


def add_workspace_projects(
    workspace: dict[str, Any],
    entries: Iterable[tuple[str, dict[str, Any]]],
    *,
    source: str = "angular.json",
) -> dict[str, Any]:
    return add_projects(workspace, entries, source=source)


def add_project_tags(
    tags_manifest: dict[str, Any],
    entries: Iterable[tuple[str, list[str]]],
    *,
    source: str = "nx.json",
) -> dict[str, Any]:
    return add_projects(
        tags_manifest,
        ((name, {"tags": list(tags)}) for name, tags in entries),
        source=source,
    )
