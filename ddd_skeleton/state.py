"""Persisted "project created" flag.

The state file is a single JSON object, ``{"projectCreated": <bool>}``. It is
read at the start of every command and written only after a project has been
generated.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ddd_skeleton.utils import print_warning


class ProjectState(BaseModel):
    """The one piece of state the CLI tracks between invocations."""

    model_config = ConfigDict(populate_by_name=True)

    project_created: bool = Field(default=False, alias="projectCreated")

    def mark_created(self) -> None:
        """Flip the flag. There is no transition back."""
        self.project_created = True

    def save(self, path: Path) -> Path:
        """Persist the state to *path* as pretty-printed JSON."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(
            self.model_dump_json(indent=2, by_alias=True), encoding="utf-8"
        )
        return target

    @classmethod
    def load(cls, path: Path) -> "ProjectState":
        """Load the state from *path*.

        A missing file yields the initial state. A file that cannot be read
        or parsed is reported and also treated as the initial state.
        """
        target = Path(path)
        if not target.exists():
            return cls()
        try:
            return cls.model_validate_json(target.read_bytes())
        except (OSError, ValueError) as exc:
            print_warning(f"Ignoring unreadable state file {target}: {exc}")
            return cls()
