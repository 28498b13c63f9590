from __future__ import annotations

import os
from dataclasses import dataclass

STYLE_EXTENSIONS = ("css", "scss", "sass", "less", "styl")


def _env_str(name: str, default: str) -> str:
    return (os.environ.get(name) or default).strip() or default


def apps_dir() -> str:
    return _env_str("APPGEN_APPS_DIR", "apps").strip("/") or "apps"


def workspace_manifest_path() -> str:
    return _env_str("APPGEN_WORKSPACE_MANIFEST", "angular.json").lstrip("/")


def tags_manifest_path() -> str:
    return _env_str("APPGEN_TAGS_MANIFEST", "nx.json").lstrip("/")


def default_prefix() -> str:
    return _env_str("APPGEN_DEFAULT_PREFIX", "app")


def default_style() -> str:
    # Unknown values fall back to plain css rather than producing odd file names.
    v = _env_str("APPGEN_DEFAULT_STYLE", "css").lower()
    return v if v in STYLE_EXTENSIONS else "css"


@dataclass(frozen=True)
class GeneratorSettings:
    apps_dir: str = "apps"
    workspace_manifest: str = "angular.json"
    tags_manifest: str = "nx.json"
    default_prefix: str = "app"
    default_style: str = "css"


def load_settings() -> GeneratorSettings:
    """Snapshot the APPGEN_* environment into a settings object."""
    return GeneratorSettings(
        apps_dir=apps_dir(),
        workspace_manifest=workspace_manifest_path(),
        tags_manifest=tags_manifest_path(),
        default_prefix=default_prefix(),
        default_style=default_style(),
    )
