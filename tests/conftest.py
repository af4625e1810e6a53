"""Shared pytest fixtures for the ddd-skeleton test suite.

Provides reusable fixtures for:
- A small, fully controlled template tree
- An empty project root and state file location
- ``GeneratorConfig`` instances pointing at either template tree
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from ddd_skeleton.config import GeneratorConfig


# ---------------------------------------------------------------------------
# Template tree
# ---------------------------------------------------------------------------

CONTEXT_FILES: dict[str, str] = {
    "domain/entities/Template.ts": "export class Template { id = 'Template'; }\n",
    "domain/services/TemplateService.ts": (
        "import { Template } from '../entities/Template';\n"
        "export class TemplateService {}\n"
    ),
    "presentation/http/TemplateController.ts": "export class TemplateController {}\n",
    "config/databaseConfig.ts": 'export const databaseConfig = { driver: "memory" };\n',
    "Template/README.md": "Nested Template directory for TemplateThing.\n",
}

SHARED_FILES: dict[str, str] = {
    "utils/Either.ts": "// Template stays verbatim in the shared layer\n",
    "enums/Responses.ts": "export enum Responses { OK = 200 }\n",
}

ROOT_FILES: dict[str, str] = {
    "package.json": '{\n  "name": "generated-app"\n}\n',
    "README.md": "# Generated Template app\n",
    "tsconfig.json": '{\n  "compilerOptions": {}\n}\n',
    ".env": "MONGODB_URI=mongodb://localhost:27017\n",
}

ENTRY_FILES: dict[str, str] = {
    "main.ts": textwrap.dedent(
        """\
        import { ApplicationCore } from "./ApplicationCore";
        import { ControllerDependencyInjector } from "./ControllerDependencyInjector";
        // configures the TemplateController
        ApplicationCore.initialize();
        """
    ),
    "ApplicationCore.ts": textwrap.dedent(
        """\
        import { RepositoryFactory } from './template/infrastructure/factories/RepositoryFactory';
        import { databaseConfig } from "./template/config/databaseConfig";
        export class ApplicationCore {}
        """
    ),
    "ControllerDependencyInjector.ts": textwrap.dedent(
        """\
        import { TemplateService } from './template/domain/services/TemplateService';
        import {  TemplateController  } from './template/presentation/http/TemplateController';
        import { ApplicationCore } from './ApplicationCore';
        export class ControllerDependencyInjector {
          static setupController() { return new TemplateController(new TemplateService()); }
        }
        """
    ),
}


def _write_files(base: Path, files: dict[str, str]) -> None:
    for rel, content in files.items():
        path = base / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """A miniature copy of the bundled template layout."""
    root = tmp_path / "templates" / "src"
    _write_files(root, ROOT_FILES)
    _write_files(root / "contexts", ENTRY_FILES)
    _write_files(root / "contexts" / "template", CONTEXT_FILES)
    _write_files(root / "contexts" / "shared", SHARED_FILES)
    return root


# ---------------------------------------------------------------------------
# Project & configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Empty directory the generator writes into."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def state_path(tmp_path: Path) -> Path:
    """Location of the state file (not created)."""
    return tmp_path / "state" / "state.json"


@pytest.fixture
def config(project_root: Path, template_root: Path, state_path: Path) -> GeneratorConfig:
    """Config pointing at the miniature template tree."""
    return GeneratorConfig(
        project_root=project_root,
        template_root=template_root,
        state_path=state_path,
    )


@pytest.fixture
def bundled_config(project_root: Path, state_path: Path) -> GeneratorConfig:
    """Config pointing at the template tree shipped with the package."""
    return GeneratorConfig(project_root=project_root, state_path=state_path)


def _snapshot(root: Path) -> dict[str, bytes | None]:
    return {
        str(p.relative_to(root)): (None if p.is_dir() else p.read_bytes())
        for p in sorted(root.rglob("*"))
    }


@pytest.fixture
def snapshot():
    """Callable mapping every path under a root to its bytes (``None`` for dirs)."""
    return _snapshot
