from __future__ import annotations

from typing import TYPE_CHECKING

from src.workspace.policy import normalize_tree_path

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterator, Mapping


class VirtualTree:
    """An in-memory, not yet committed set of files keyed by relative path.

    Insertion order is kept so that generated output is listed in the order
    it was produced. Paths are normalised on the way in, so '/angular.json'
    and 'angular.json' address the same entry.
    """

    def __init__(self, files: Mapping[str, str] | None = None) -> None:
        self._files: dict[str, str] = {}
        for path, content in (files or {}).items():
            self.create(path, content)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.exists(path)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._files))

    def __len__(self) -> int:
        return len(self._files)

    def exists(self, path: str) -> bool:
        return normalize_tree_path(path) in self._files

    def read(self, path: str) -> str:
        p = normalize_tree_path(path)
        try:
            return self._files[p]
        except KeyError:
            raise FileNotFoundError(p) from None

    def create(self, path: str, content: str) -> None:
        p = normalize_tree_path(path)
        if p in self._files:
            raise FileExistsError(p)
        self._files[p] = content

    def overwrite(self, path: str, content: str) -> None:
        p = normalize_tree_path(path)
        if p not in self._files:
            raise FileNotFoundError(p)
        self._files[p] = content

    def paths(self, prefix: str = "") -> list[str]:
        if not prefix:
            return list(self._files)
        pre = normalize_tree_path(prefix).rstrip("/") + "/"
        return [p for p in self._files if p.startswith(pre)]

    def items(self) -> list[tuple[str, str]]:
        return list(self._files.items())

    def copy(self) -> VirtualTree:
        clone = VirtualTree()
        clone._files = dict(self._files)
        return clone
