"""Project-root configuration files and context entry points.

Two independent phases run when a project is created:

1. The singleton root files (``package.json``, ``README.md``,
   ``tsconfig.json``, ``.env``) are copied byte-for-byte into the project
   root. A file that already exists there is never overwritten.
2. The entry-point files that wire the application together are rewritten
   for the new context: placeholder substitution over the whole file (and its
   name), then the ``./template/`` imports are pointed at the context
   directory.

Every file is handled on its own; a missing or failing file is reported and
the remaining files are still processed.
"""

from __future__ import annotations

from pathlib import Path

from ddd_skeleton.scaffolder.substitution import (
    capitalize,
    rewrite_context_imports,
    substitute,
)
from ddd_skeleton.utils import print_error, print_info, print_warning

ROOT_CONFIG_FILES: tuple[str, ...] = (
    "package.json",
    "README.md",
    "tsconfig.json",
    ".env",
)

ENTRY_POINT_FILES: tuple[str, ...] = (
    "main.ts",
    "ApplicationCore.ts",
    "ControllerDependencyInjector.ts",
)


def copy_root_files(
    template_root: str | Path,
    project_root: str | Path,
    files: tuple[str, ...] = ROOT_CONFIG_FILES,
) -> list[Path]:
    """Copy the singleton root files that are not yet present.

    Returns:
        The destination paths that were written.
    """
    written: list[Path] = []
    for name in files:
        src_file = Path(template_root) / name
        dest_file = Path(project_root) / name

        if not src_file.is_file():
            print_warning(f"The source file does not exist: {src_file}")
            continue
        if dest_file.exists():
            print_info(f"The file already exists at the destination: {dest_file}")
            continue

        try:
            dest_file.parent.mkdir(parents=True, exist_ok=True)
            dest_file.write_bytes(src_file.read_bytes())
        except OSError as exc:
            print_error(f"Error copying {src_file} to {dest_file}: {exc}")
            continue
        written.append(dest_file)
    return written


def render_entry_point(content: str, context_name: str) -> str:
    """Apply both entry-point rewrites to *content*, in order."""
    content = substitute(content, capitalize(context_name))
    return rewrite_context_imports(content, context_name)


def rewrite_entry_points(
    template_dir: str | Path,
    contexts_dir: str | Path,
    context_name: str,
    files: tuple[str, ...] = ENTRY_POINT_FILES,
) -> list[Path]:
    """Write the entry-point files for *context_name* into *contexts_dir*.

    Entry points are always (re)written; they are not guarded like the root
    files.

    Returns:
        The destination paths that were written.
    """
    replacement = capitalize(context_name)
    written: list[Path] = []
    for name in files:
        src_file = Path(template_dir) / name
        dest_file = Path(contexts_dir) / substitute(name, replacement)

        if not src_file.is_file():
            print_warning(f"File not found: {src_file}")
            continue

        try:
            content = src_file.read_bytes().decode("utf-8", errors="surrogateescape")
            rendered = render_entry_point(content, context_name)
            dest_file.parent.mkdir(parents=True, exist_ok=True)
            dest_file.write_bytes(rendered.encode("utf-8", errors="surrogateescape"))
        except OSError as exc:
            print_error(
                f'Error processing and copying main file "{name}" '
                f'for "{context_name}": {exc}'
            )
            continue
        written.append(dest_file)
    return written


def materialize_root_config(
    template_root: str | Path,
    project_root: str | Path,
    contexts_dir: str | Path,
    context_name: str,
    template_contexts_dir: str | Path | None = None,
) -> list[Path]:
    """Run the root-file copy and the entry-point rewrite for *context_name*.

    Args:
        template_root: Template directory holding the singleton root files.
        project_root: Destination for the singleton root files.
        contexts_dir: Destination for the entry-point files.
        context_name: Lowercase context identifier.
        template_contexts_dir: Template directory holding the entry points.
            Defaults to ``<template_root>/contexts``.

    Returns:
        Every destination path written by either phase.
    """
    if template_contexts_dir is None:
        template_contexts_dir = Path(template_root) / "contexts"
    written = copy_root_files(template_root, project_root)
    written.extend(rewrite_entry_points(template_contexts_dir, contexts_dir, context_name))
    return written
