from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from src.workspace.config import GeneratorSettings, load_settings
from src.workspace.manifests import ManifestReadError
from src.workspace.policy import normalize_tree_path
from src.workspace.tree import VirtualTree

if TYPE_CHECKING:  # pragma: no cover
    from src.app_schematic.generate import GenerationResult

logger = logging.getLogger(__name__)


def load_workspace(
    root: str | Path, settings: GeneratorSettings | None = None
) -> VirtualTree:
    """Read the workspace and tag manifests under *root* into a fresh tree."""
    settings = settings or load_settings()
    base = Path(root)
    tree = VirtualTree()
    for rel in (settings.workspace_manifest, settings.tags_manifest):
        path = base / normalize_tree_path(rel)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ManifestReadError(f"{rel} not found under {base}") from exc
        tree.create(rel, text)
    return tree


def commit_result(root: str | Path, result: GenerationResult) -> list[str]:
    """Write a generation result below *root* and return the written paths.

    New files must not exist yet; this is checked for every file before the
    first write so a conflict leaves the directory untouched. Manifests are
    rewritten in full.
    """
    base = Path(root)
    conflicts = [
        rel for rel in result.files if (base / normalize_tree_path(rel)).exists()
    ]
    if conflicts:
        raise FileExistsError(
            f"refusing to overwrite existing files: {', '.join(sorted(conflicts))}"
        )

    written: list[str] = []
    for rel, content in result.files.items():
        target = base / normalize_tree_path(rel)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        logger.debug("Created %s", rel)
        written.append(rel)

    for rel, text in result.manifest_texts().items():
        target = base / normalize_tree_path(rel)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
        logger.debug("Updated %s", rel)
        written.append(rel)

    logger.info(
        "Committed %d files for %s and %s to %s",
        len(written),
        result.app_project,
        result.e2e_project,
        base,
    )
    return written
