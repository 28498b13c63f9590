from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.workspace.config import GeneratorSettings
from src.workspace.naming import classify, dasherize, split_tags, validate_path_segments

StyleExt = Literal["css", "scss", "sass", "less", "styl"]


class InvalidOptionsError(ValueError):
    pass


class AppOptions(BaseModel):
    """Options accepted by the app generator.

    Keys may be given in snake_case or in the camelCase used by workspace
    tooling (``skipTests``, ``inlineStyle``, ``inlineTemplate``).
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    name: str
    directory: str | None = None
    tags: str | None = None
    routing: bool = False
    style: StyleExt | None = None
    prefix: str | None = None
    skip_tests: bool = Field(default=False, alias="skipTests")
    inline_style: bool = Field(default=False, alias="inlineStyle")
    inline_template: bool = Field(default=False, alias="inlineTemplate")

    @field_validator("name")
    @classmethod
    def _name_required(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("name is required")
        return v

    @field_validator("directory", "tags", "prefix")
    @classmethod
    def _blank_is_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None


def parse_app_options(raw: AppOptions | Mapping[str, Any]) -> AppOptions:
    if isinstance(raw, AppOptions):
        return raw
    try:
        return AppOptions.model_validate(dict(raw))
    except ValidationError as exc:
        raise InvalidOptionsError(str(exc)) from exc


@dataclass(frozen=True)
class ProjectNames:
    app_directory: str
    project_name: str
    project_root: str
    e2e_project_name: str
    e2e_project_root: str


def resolve_project_names(
    name: str, directory: str | None = None, *, apps_dir: str = "apps"
) -> ProjectNames:
    """Derive identifiers and roots for an app and its e2e sibling."""
    app_dir = dasherize(name.strip())
    if directory:
        app_dir = f"{dasherize(directory.strip().strip('/'))}/{app_dir}"
    try:
        validate_path_segments(app_dir)
    except ValueError as exc:
        raise InvalidOptionsError(str(exc)) from exc

    project_name = app_dir.replace("/", "-")
    project_root = f"{apps_dir}/{app_dir}"
    return ProjectNames(
        app_directory=app_dir,
        project_name=project_name,
        project_root=project_root,
        e2e_project_name=f"{project_name}-e2e",
        e2e_project_root=f"{project_root}-e2e",
    )


_PREFIX_RE = re.compile(r"^[a-zA-Z][.0-9a-zA-Z]*(-[.0-9a-zA-Z]*)*$")


def _validate_prefix(prefix: str) -> str:
    if not _PREFIX_RE.match(prefix):
        raise InvalidOptionsError(f"invalid selector prefix {prefix!r}")
    return prefix


@dataclass(frozen=True)
class NormalizedOptions:
    options: AppOptions
    names: ProjectNames
    parsed_tags: tuple[str, ...]
    style: str
    prefix: str
    class_name: str


def normalize_options(
    raw: AppOptions | Mapping[str, Any], settings: GeneratorSettings
) -> NormalizedOptions:
    opts = parse_app_options(raw)
    names = resolve_project_names(
        opts.name, opts.directory, apps_dir=settings.apps_dir
    )
    return NormalizedOptions(
        options=opts,
        names=names,
        parsed_tags=tuple(split_tags(opts.tags)),
        style=opts.style or settings.default_style,
        prefix=_validate_prefix(opts.prefix or settings.default_prefix),
        class_name=classify(names.project_name),
    )
