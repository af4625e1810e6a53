"""Main scaffolding orchestrator.

Decides, for each command, which generation steps run, in what order, and
under which existence guards. A project is bootstrapped once per repository:
the shared layer doubles as the marker that some project already exists.
"""

from __future__ import annotations

from pathlib import Path

from ddd_skeleton.config import GeneratorConfig
from ddd_skeleton.scaffolder.copier import copy_tree, instantiate_template
from ddd_skeleton.scaffolder.root_config import materialize_root_config
from ddd_skeleton.utils import (
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
)


# ---------------------------------------------------------------------------
# Test skeleton layout
# ---------------------------------------------------------------------------

# Layer -> sub-layers. Only the layer directories are created on disk.
TEST_LAYOUT: dict[str, tuple[str, ...]] = {
    "application": ("useCaseCreate", "useCaseFind"),
    "domain": ("entities", "valueObjects", "repositories"),
    "infrastructure": ("http", "persistence"),
    "presentation": (),
    "utils": (),
}

SKIPPED = "skipped"


def _step_result(ran: bool, path: Path) -> str:
    return str(path) if ran else SKIPPED


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for scaffolder errors."""


class InvalidContextNameError(ScaffoldError, ValueError):
    """Raised when a context name cannot be used as a directory name."""


def validate_context_name(context_name: str) -> str:
    """Return *context_name* unchanged if it names a single directory.

    Raises:
        InvalidContextNameError: For empty names, names containing a path
            separator, and the ``.`` / ``..`` segments.
    """
    if not isinstance(context_name, str) or not context_name:
        raise InvalidContextNameError("Invalid context name provided.")
    if "/" in context_name or "\\" in context_name or context_name in (".", ".."):
        raise InvalidContextNameError(
            f'Invalid context name "{context_name}": must be a single path segment.'
        )
    return context_name


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Generates projects and contexts from the bundled template tree.

    Per context the lifecycle is ``ABSENT -> CREATED``. Nothing here updates
    or deletes a generated context.
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = config or GeneratorConfig()

    # -- Public API --------------------------------------------------------

    def create_project(self, context_name: str) -> bool:
        """Bootstrap a new project around its first context.

        Steps, in order: the context tree, the root configuration and entry
        points, the shared layer, and the test skeleton.

        Returns:
            ``True`` if generation ran, ``False`` if a guard stopped it before
            any write.
        """
        try:
            validate_context_name(context_name)
        except InvalidContextNameError as exc:
            print_error(str(exc))
            return False

        if self.config.context_path(context_name).exists():
            print_warning(f'Project "{context_name}" already exists.')
            return False
        if self.config.shared_path.exists():
            print_warning("A project already exists, try creating a context.")
            return False

        context_done = self.generate_context_structure(context_name)
        written = self.copy_configuration(context_name)
        shared_done = self.generate_shared_structure(context_name)
        tests_done = self.generate_test_structure(context_name)

        print_summary_table(
            {
                "Context": _step_result(context_done, self.config.context_path(context_name)),
                "Files": ", ".join(p.name for p in written) or SKIPPED,
                "Shared layer": _step_result(shared_done, self.config.shared_path),
                "Tests": _step_result(tests_done, self.config.context_test_path(context_name)),
            },
            title=f'Project "{context_name}"',
        )
        return True

    def create_context(self, context_name: str) -> bool:
        """Add another context to an existing project.

        Only the context tree and its test skeleton are generated; the shared
        layer and root configuration are left alone.
        """
        try:
            validate_context_name(context_name)
        except InvalidContextNameError as exc:
            print_error(str(exc))
            return False

        if self.config.context_path(context_name).exists():
            print_warning(f'Context "{context_name}" already exists.')
            return False

        self.generate_context_structure(context_name)
        self.generate_test_structure(context_name)
        return True

    def create_file(self, name: str, context_name: str, file_type: str) -> None:
        """Report the file that would be created. Writes nothing."""
        print_info(f"File created at {name} {context_name} {file_type}")

    # -- Individual steps --------------------------------------------------

    # Each step returns whether it ran; False means it was skipped.

    def generate_context_structure(self, context_name: str) -> bool:
        """Instantiate the per-context template for *context_name*."""
        context_path = self.config.context_path(context_name)
        if context_path.exists():
            print_warning(
                f'Folder structure already exists for context "{context_name}".'
            )
            return False

        template_path = self.config.context_template_path
        if not template_path.is_dir():
            print_warning(f"Context template not found: {template_path}")
            return False

        instantiate_template(template_path, context_path, context_name)
        print_success(f'Project created for "{context_name}" context.')
        return True

    def copy_configuration(self, context_name: str) -> list[Path]:
        """Copy the root files and write the entry points for *context_name*."""
        return materialize_root_config(
            self.config.template_root,
            self.config.project_root,
            self.config.contexts_path,
            context_name,
            template_contexts_dir=self.config.template_contexts_path,
        )

    def generate_shared_structure(self, context_name: str) -> bool:
        """Copy the shared layer verbatim unless it already exists."""
        shared_path = self.config.shared_path
        if shared_path.exists():
            print_warning(
                f'Folder structure already exists for context "{context_name}".'
            )
            return False

        template_path = self.config.shared_template_path
        if not template_path.is_dir():
            print_warning(f"Shared template not found: {template_path}")
            return False

        copy_tree(template_path, shared_path)
        return True

    def generate_test_structure(self, context_name: str) -> bool:
        """Create the empty per-layer test directories for *context_name*."""
        test_path = self.config.context_test_path(context_name)
        if test_path.exists():
            print_warning(
                f'Folder test structure already exists for context "{context_name}".'
            )
            return False

        try:
            for layer in TEST_LAYOUT:
                (test_path / layer).mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            print_error(
                f'Error generating folder test structure for "{context_name}": {exc}'
            )
            return False

        print_success(f'Test structure initialized for context "{context_name}".')
        return True
