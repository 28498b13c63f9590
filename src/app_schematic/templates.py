"""Template rendering for the app generator.

Templates live under ``files/<kind>/`` and mirror the layout of the project
they produce, relative to its root. Files ending in ``.j2`` are rendered with
Jinja2 using the ``<%= value %>`` / ``<% block %>`` delimiters so that
Angular's own ``{{ }}`` bindings pass through untouched; other files are
copied verbatim. Two more substitution points apply to file names: the
``.j2`` suffix is stripped and ``__style__`` becomes the chosen stylesheet
extension. Files whose name starts with ``_`` are partials for ``include``.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from src.workspace.policy import offset_from_root

if TYPE_CHECKING:  # pragma: no cover
    from src.app_schematic.options import NormalizedOptions

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "files"
TEMPLATE_SUFFIX = ".j2"
PARTIAL_PREFIX = "_"
STYLE_PLACEHOLDER = "__style__"

# Paths (relative to a project root, after name substitution) dropped by options.
_TEST_ONLY = ("karma.conf.js", "tsconfig.spec.json", "src/test.ts")


class TemplateRenderError(RuntimeError):
    pass


@lru_cache(maxsize=1)
def template_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        block_start_string="<%",
        block_end_string="%>",
        variable_start_string="<%=",
        variable_end_string="%>",
        comment_start_string="<%#",
        comment_end_string="%>",
    )


def _is_partial(template_name: str) -> bool:
    return template_name.rsplit("/", 1)[-1].startswith(PARTIAL_PREFIX)


def output_name(template_name: str, *, style: str) -> str:
    name = template_name
    if name.endswith(TEMPLATE_SUFFIX):
        name = name[: -len(TEMPLATE_SUFFIX)]
    return name.replace(STYLE_PLACEHOLDER, style)


def _included(rel: str, opts: NormalizedOptions) -> bool:
    o = opts.options
    if o.skip_tests and (rel in _TEST_ONLY or rel.endswith(".spec.ts")):
        return False
    if o.inline_style and rel == f"src/app/app.component.{opts.style}":
        return False
    if o.inline_template and rel == "src/app/app.component.html":
        return False
    return True


def template_context(opts: NormalizedOptions, project_root: str) -> dict[str, Any]:
    o = opts.options
    return {
        "project_name": opts.names.project_name,
        "e2e_project_name": opts.names.e2e_project_name,
        "project_root": project_root,
        "offset_from_root": offset_from_root(project_root),
        "class_name": opts.class_name,
        "prefix": opts.prefix,
        "style": opts.style,
        "routing": o.routing,
        "inline_style": o.inline_style,
        "inline_template": o.inline_template,
    }


def render_project_files(
    kind: str, opts: NormalizedOptions, project_root: str
) -> dict[str, str]:
    """Render every template of *kind* ('app' or 'e2e') into tree paths."""
    env = template_environment()
    prefix = f"{kind}/"
    names = [
        n
        for n in env.list_templates()
        if n.startswith(prefix) and not _is_partial(n)
    ]
    if not names:
        raise TemplateRenderError(f"no templates found for {kind!r} in {TEMPLATES_DIR}")

    ctx = template_context(opts, project_root)
    out: dict[str, str] = {}
    for name in names:
        rel = output_name(name[len(prefix) :], style=opts.style)
        if not _included(rel, opts):
            continue
        try:
            if name.endswith(TEMPLATE_SUFFIX):
                text = env.get_template(name).render(**ctx)
            else:
                # Static file, copied verbatim.
                text = env.loader.get_source(env, name)[0]
        except TemplateError as exc:
            raise TemplateRenderError(f"failed to render {name}: {exc}") from exc
        out[f"{project_root}/{rel}"] = text
        logger.debug("Rendered %s -> %s/%s", name, project_root, rel)
    return out
