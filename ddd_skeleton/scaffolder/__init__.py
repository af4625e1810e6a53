"""ddd-skeleton scaffolder -- instantiates the bundled DDD template tree.

The per-context template is copied with the ``Template`` placeholder replaced
by the capitalised context name; the shared layer is copied verbatim; root
configuration files are copied once; entry points are rewritten to import
from the new context.

Quick usage::

    from ddd_skeleton.config import GeneratorConfig
    from ddd_skeleton.scaffolder import ProjectGenerator

    generator = ProjectGenerator(GeneratorConfig(project_root=Path("/tmp/app")))
    generator.create_project("billing")
"""

from ddd_skeleton.scaffolder.copier import copy_tree, instantiate_template
from ddd_skeleton.scaffolder.generator import (
    TEST_LAYOUT,
    InvalidContextNameError,
    ProjectGenerator,
    ScaffoldError,
    validate_context_name,
)
from ddd_skeleton.scaffolder.root_config import materialize_root_config
from ddd_skeleton.scaffolder.substitution import PLACEHOLDER, capitalize, substitute

__all__ = [
    "PLACEHOLDER",
    "TEST_LAYOUT",
    "InvalidContextNameError",
    "ProjectGenerator",
    "ScaffoldError",
    "capitalize",
    "copy_tree",
    "instantiate_template",
    "materialize_root_config",
    "substitute",
    "validate_context_name",
]
