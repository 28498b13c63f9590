"""Workspace primitives shared by the generators.

This package contains:
- An in-memory virtual file tree with normalised, unique paths
- Readers/updaters for the workspace and tag manifests
- Name helpers (dasherize/classify) and the apps directory layout
- Loading/committing a tree from/to a real directory
"""
