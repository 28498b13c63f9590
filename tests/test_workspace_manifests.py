from __future__ import annotations

import json

import pytest

from src.workspace.manifests import (
    ManifestReadError,
    ProjectExistsError,
    add_project_tags,
    add_workspace_projects,
    read_json_in_tree,
    serialize_json,
)
from src.workspace.tree import VirtualTree


def test_read_json_in_tree_errors() -> None:
    tree = VirtualTree({"bad.json": "{", "list.json": "[]"})
    with pytest.raises(ManifestReadError):
        read_json_in_tree(tree, "bad.json")
    with pytest.raises(ManifestReadError):
        read_json_in_tree(tree, "list.json")
    with pytest.raises(ManifestReadError):
        read_json_in_tree(tree, "missing.json")


def test_add_workspace_projects_copies_and_preserves() -> None:
    doc = {"version": 1, "projects": {"a": {"root": "apps/a/"}}}
    out = add_workspace_projects(doc, [("b", {"root": "apps/b/"})])
    assert out == {
        "version": 1,
        "projects": {"a": {"root": "apps/a/"}, "b": {"root": "apps/b/"}},
    }
    assert doc == {"version": 1, "projects": {"a": {"root": "apps/a/"}}}


def test_add_workspace_projects_rejects_existing_name() -> None:
    doc = {"projects": {"a": {"root": "apps/a/"}}}
    with pytest.raises(ProjectExistsError) as exc_info:
        add_workspace_projects(doc, [("a", {"root": "x/"})])
    assert "angular.json" in str(exc_info.value)


def test_add_project_tags() -> None:
    doc = {"npmScope": "proj", "projects": {}}
    out = add_project_tags(doc, [("app", ["one", "two"]), ("app-e2e", [])])
    assert out == {
        "npmScope": "proj",
        "projects": {"app": {"tags": ["one", "two"]}, "app-e2e": {"tags": []}},
    }


def test_projects_must_be_an_object() -> None:
    with pytest.raises(ManifestReadError):
        add_project_tags({"projects": []}, [("a", [])])


def test_serialize_json_round_trips() -> None:
    doc = {"npmScope": "proj", "projects": {"a": {"tags": ["x"]}}}
    text = serialize_json(doc)
    assert text.endswith("}\n")
    assert json.loads(text) == doc
    assert serialize_json(json.loads(text)) == text
