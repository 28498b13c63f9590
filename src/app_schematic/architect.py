from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover
    from src.app_schematic.options import NormalizedOptions

_LINT_EXCLUDE = ["**/node_modules/**"]


def _build_target(opts: NormalizedOptions) -> dict[str, Any]:
    root = opts.names.project_root
    src = f"{root}/src"
    return {
        "builder": "@angular-devkit/build-angular:browser",
        "options": {
            "outputPath": f"dist/{root}",
            "index": f"{src}/index.html",
            "main": f"{src}/main.ts",
            "polyfills": f"{src}/polyfills.ts",
            "tsConfig": f"{root}/tsconfig.app.json",
            "assets": [f"{src}/assets"],
            "styles": [f"{src}/styles.{opts.style}"],
            "scripts": [],
        },
        "configurations": {
            "production": {
                "fileReplacements": [
                    {
                        "replace": f"{src}/environments/environment.ts",
                        "with": f"{src}/environments/environment.prod.ts",
                    }
                ],
                "optimization": True,
                "outputHashing": "all",
                "sourceMap": False,
                "extractCss": True,
                "namedChunks": False,
                "aot": True,
                "extractLicenses": True,
                "vendorChunk": False,
                "buildOptimizer": True,
            }
        },
    }


def _test_target(opts: NormalizedOptions) -> dict[str, Any]:
    root = opts.names.project_root
    src = f"{root}/src"
    return {
        "builder": "@angular-devkit/build-angular:karma",
        "options": {
            "main": f"{src}/test.ts",
            "polyfills": f"{src}/polyfills.ts",
            "tsConfig": f"{root}/tsconfig.spec.json",
            "karmaConfig": f"{root}/karma.conf.js",
            "styles": [f"{src}/styles.{opts.style}"],
            "scripts": [],
            "assets": [f"{src}/assets"],
        },
    }


def app_project_descriptor(opts: NormalizedOptions) -> dict[str, Any]:
    """Workspace entry for the application project."""
    names = opts.names
    root = names.project_root
    project = names.project_name

    lint_configs = [f"{root}/tsconfig.app.json"]
    architect: dict[str, Any] = {
        "build": _build_target(opts),
        "serve": {
            "builder": "@angular-devkit/build-angular:dev-server",
            "options": {"browserTarget": f"{project}:build"},
            "configurations": {
                "production": {"browserTarget": f"{project}:build:production"}
            },
        },
        "extract-i18n": {
            "builder": "@angular-devkit/build-angular:extract-i18n",
            "options": {"browserTarget": f"{project}:build"},
        },
    }
    if not opts.options.skip_tests:
        architect["test"] = _test_target(opts)
        lint_configs.append(f"{root}/tsconfig.spec.json")
    architect["lint"] = {
        "builder": "@angular-devkit/build-angular:tslint",
        "options": {"tsConfig": lint_configs, "exclude": list(_LINT_EXCLUDE)},
    }

    out: dict[str, Any] = {
        "root": f"{root}/",
        "sourceRoot": f"{root}/src",
        "projectType": "application",
        "prefix": opts.prefix,
    }
    if opts.style != "css":
        out["schematics"] = {"@nrwl/schematics:component": {"styleext": opts.style}}
    out["architect"] = architect
    return out


def e2e_project_descriptor(opts: NormalizedOptions) -> dict[str, Any]:
    """Workspace entry for the e2e project, served against the app."""
    names = opts.names
    root = names.e2e_project_root
    app = names.project_name
    return {
        "root": f"{root}/",
        "projectType": "application",
        "architect": {
            "e2e": {
                "builder": "@angular-devkit/build-angular:protractor",
                "options": {
                    "protractorConfig": f"{root}/protractor.conf.js",
                    "devServerTarget": f"{app}:serve",
                },
                "configurations": {
                    "production": {"devServerTarget": f"{app}:serve:production"}
                },
            },
            "lint": {
                "builder": "@angular-devkit/build-angular:tslint",
                "options": {
                    "tsConfig": f"{root}/tsconfig.e2e.json",
                    "exclude": list(_LINT_EXCLUDE),
                },
            },
        },
    }
