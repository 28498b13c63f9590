from __future__ import annotations

import posixpath


def normalize_tree_path(path: str) -> str:
    """Normalize a tree path like '/apps/my-app/src/main.ts' to 'apps/my-app/src/main.ts'.

    Tree paths are always relative to the workspace root; a leading '/' is
    accepted and dropped.
    """
    raw = (path or "").strip()
    if not raw:
        raise ValueError("empty path")
    if "\x00" in raw:
        raise ValueError("invalid path")
    raw = raw.replace("\\", "/")

    # normpath collapses "..", so check the raw segments first.
    if ".." in raw.split("/"):
        raise ValueError("path traversal not allowed")

    norm = posixpath.normpath("/" + raw.lstrip("/")).lstrip("/")
    if not norm or norm == ".":
        raise ValueError("refusing to address the tree root")
    return norm


def offset_from_root(path: str) -> str:
    """Return one '../' per segment of *path*, e.g. 'apps/my-app/' -> '../../'."""
    segments = [s for s in (path or "").split("/") if s and s != "."]
    return "../" * len(segments)
