"""ddd-skeleton configuration.

Typed configuration for the generator. Every path the generator reads from or
writes to is derived from a ``GeneratorConfig`` instance, so tests and the CLI
can point the whole layout somewhere else without touching the scaffolder.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

PACKAGE_DIR = Path(__file__).parent

DEFAULT_TEMPLATE_ROOT = PACKAGE_DIR / "scaffolder" / "templates" / "src"
DEFAULT_STATE_PATH = PACKAGE_DIR / "state.json"


class GeneratorConfig(BaseModel):
    """Paths and directory names used by the scaffolder.

    The generated project is laid out as::

        <project_root>/
            package.json, README.md, tsconfig.json, .env
            <source_dir>/<contexts_dir_name>/
                main.ts, ApplicationCore.ts, ControllerDependencyInjector.ts
                <context>/...
                <shared_dir_name>/...
            <test_dir_name>/<context>/<layer>/
    """

    project_root: Path = Field(default_factory=Path.cwd)
    template_root: Path = Field(default=DEFAULT_TEMPLATE_ROOT)
    state_path: Path = Field(default=DEFAULT_STATE_PATH)
    source_dir: str = Field(default="src")
    contexts_dir_name: str = Field(default="contexts")
    shared_dir_name: str = Field(default="shared")
    test_dir_name: str = Field(default="test")
    context_template_name: str = Field(default="template")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def contexts_path(self) -> Path:
        """Directory holding every generated context and the entry points."""
        return self.project_root / self.source_dir / self.contexts_dir_name

    @property
    def shared_path(self) -> Path:
        """Destination of the shared layer."""
        return self.contexts_path / self.shared_dir_name

    @property
    def test_path(self) -> Path:
        """Root of the per-context test skeletons."""
        return self.project_root / self.test_dir_name

    @property
    def template_contexts_path(self) -> Path:
        """Template directory holding the entry-point files."""
        return self.template_root / self.contexts_dir_name

    @property
    def context_template_path(self) -> Path:
        """Per-context template tree (placeholder-bearing)."""
        return self.template_contexts_path / self.context_template_name

    @property
    def shared_template_path(self) -> Path:
        """Shared template tree (copied verbatim)."""
        return self.template_contexts_path / self.shared_dir_name

    def context_path(self, context_name: str) -> Path:
        """Destination directory for *context_name*."""
        return self.contexts_path / context_name

    def context_test_path(self, context_name: str) -> Path:
        """Test skeleton directory for *context_name*."""
        return self.test_path / context_name

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            DDD_SKELETON_PROJECT_ROOT, DDD_SKELETON_TEMPLATE_ROOT,
            DDD_SKELETON_STATE_FILE, DDD_SKELETON_SOURCE_DIR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("DDD_SKELETON_PROJECT_ROOT"):
            kwargs["project_root"] = Path(os.environ["DDD_SKELETON_PROJECT_ROOT"])
        if os.environ.get("DDD_SKELETON_TEMPLATE_ROOT"):
            kwargs["template_root"] = Path(os.environ["DDD_SKELETON_TEMPLATE_ROOT"])
        if os.environ.get("DDD_SKELETON_STATE_FILE"):
            kwargs["state_path"] = Path(os.environ["DDD_SKELETON_STATE_FILE"])
        if "DDD_SKELETON_SOURCE_DIR" in os.environ:
            kwargs["source_dir"] = os.environ["DDD_SKELETON_SOURCE_DIR"]
        return cls(**kwargs)
