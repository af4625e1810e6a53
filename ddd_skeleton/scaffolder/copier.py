"""Recursive directory copying for the scaffolder.

Two entry points:

* :func:`copy_tree` mirrors a directory verbatim (or through a caller-supplied
  content transform and entry rename).
* :func:`instantiate_template` mirrors the per-context template, substituting
  the placeholder in every entry name and every file's contents.

Neither function raises on filesystem errors. A failure aborts the subtree
being copied at that level, is reported with both paths, and leaves anything
already written in place.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ddd_skeleton.scaffolder.substitution import capitalize, substitute
from ddd_skeleton.utils import print_error, print_warning

TextTransform = Callable[[str], str]


def copy_tree(
    src_dir: str | Path,
    dest_dir: str | Path,
    transform: TextTransform | None = None,
    rename: TextTransform | None = None,
) -> None:
    """Recursively copy *src_dir* into *dest_dir*.

    Missing destination directories are created. Existing destination files
    are overwritten without notice.

    Args:
        src_dir: Existing source directory.
        dest_dir: Destination directory (created with its parents if absent).
        transform: Optional text transform. When given, each file is decoded
            as UTF-8 (undecodable bytes kept via ``surrogateescape``), passed
            through it, and the result is written instead of the raw bytes.
        rename: Optional transform applied to each entry name (not the full
            path) before it is joined to the destination.
    """
    src = Path(src_dir)
    dest = Path(dest_dir)
    try:
        dest.mkdir(parents=True, exist_ok=True)
        for item in sorted(src.iterdir(), key=lambda p: p.name):
            target_name = rename(item.name) if rename else item.name
            target = dest / target_name
            if item.is_dir():
                copy_tree(item, target, transform=transform, rename=rename)
            elif transform is None:
                target.write_bytes(item.read_bytes())
            else:
                content = item.read_bytes().decode("utf-8", errors="surrogateescape")
                target.write_bytes(
                    transform(content).encode("utf-8", errors="surrogateescape")
                )
    except OSError as exc:
        print_error(f"Error copying directory from {src} to {dest}: {exc}")


def instantiate_template(
    src_dir: str | Path, dest_dir: str | Path, context_name: str
) -> None:
    """Mirror a template tree into *dest_dir* for *context_name*.

    The placeholder is replaced by the capitalised context name in entry
    names and file contents alike. If *dest_dir* already exists nothing is
    written.
    """
    dest = Path(dest_dir)
    if dest.exists():
        print_warning(f"Folder structure already exists at {dest}.")
        return

    replacement = capitalize(context_name)

    def _substitute(value: str) -> str:
        return substitute(value, replacement)

    copy_tree(src_dir, dest, transform=_substitute, rename=_substitute)
