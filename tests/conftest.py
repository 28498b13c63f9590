import json
import sys
from pathlib import Path

import pytest

# Ensure the repo root is on sys.path so tests can import the local `src/` package.
ROOT = str(Path(__file__).resolve().parents[1])
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from src.workspace.tree import VirtualTree  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_generator_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Keep every test on the built-in defaults unless it opts in explicitly.
    for name in (
        "APPGEN_APPS_DIR",
        "APPGEN_WORKSPACE_MANIFEST",
        "APPGEN_TAGS_MANIFEST",
        "APPGEN_DEFAULT_PREFIX",
        "APPGEN_DEFAULT_STYLE",
    ):
        monkeypatch.delenv(name, raising=False)


def empty_workspace_files() -> dict[str, str]:
    return {
        "/angular.json": json.dumps({"version": 1, "projects": {}, "newProjectRoot": ""}),
        "/nx.json": json.dumps({"npmScope": "proj", "projects": {}}),
        "/tsconfig.json": json.dumps({"compilerOptions": {"paths": {}}}),
        "/tslint.json": json.dumps({"rules": {}}),
    }


@pytest.fixture
def app_tree() -> VirtualTree:
    return VirtualTree(empty_workspace_files())
