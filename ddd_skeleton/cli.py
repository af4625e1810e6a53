"""Command-line entry point for ddd-skeleton.

Usage::

    ddd-skeleton --create-project --name=billing
    python -m ddd_skeleton --create-project --name=billing

``--create-context`` and ``--create-file`` are part of the command surface but
are not implemented yet; the dispatcher refuses them before doing anything.
Every outcome is reported on the console and the exit code is always 0.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from enum import Enum
from pathlib import Path

from ddd_skeleton.config import GeneratorConfig
from ddd_skeleton.scaffolder.generator import ProjectGenerator
from ddd_skeleton.state import ProjectState
from ddd_skeleton.utils import console, print_error, print_warning

PROG = "ddd-skeleton"


class Command(Enum):
    """Commands known to the CLI and whether they may be executed."""

    CREATE_PROJECT = ("create-project", True)
    CREATE_CONTEXT = ("create-context", False)
    CREATE_FILE = ("create-file", False)

    def __init__(self, flag: str, implemented: bool) -> None:
        self.flag = flag
        self.implemented = implemented


USAGE: dict[Command, str] = {
    Command.CREATE_PROJECT: f"{PROG} --create-project --name=<name>",
    Command.CREATE_CONTEXT: f"{PROG} --create-context --name=<name>",
    Command.CREATE_FILE: (
        f"{PROG} --create-file --name=<name> --context=<context> --type=<type>"
    ),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Generate a DDD TypeScript project skeleton",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {PROG} --create-project --name=billing\n"
            f"  {PROG} --create-project --name=billing --project-root ./my-app\n"
        ),
    )

    commands = parser.add_mutually_exclusive_group()
    for command in Command:
        commands.add_argument(
            f"--{command.flag}",
            dest="command",
            action="store_const",
            const=command,
            help=None if command.implemented else "not implemented yet",
        )

    parser.add_argument("--name", type=str.lower, default=None)
    parser.add_argument("--context", type=str.lower, default=None)
    parser.add_argument("--type", dest="file_type", type=str.lower, default=None)
    parser.add_argument(
        "--project-root",
        type=Path,
        default=None,
        help="Directory to generate into (default: current directory)",
    )
    parser.add_argument(
        "--state-file",
        type=Path,
        default=None,
        help="Override the location of the project state file",
    )
    return parser


def print_usage() -> None:
    console.print("Available commands:")
    for command in Command:
        if command.implemented:
            console.print(f"  {USAGE[command]}")


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _save_state(state: ProjectState, config: GeneratorConfig) -> None:
    try:
        state.save(config.state_path)
    except OSError as exc:
        print_error(f"Could not write state file {config.state_path}: {exc}")


def _create_project(
    args: argparse.Namespace, state: ProjectState, generator: ProjectGenerator
) -> None:
    if not args.name:
        print_warning(f"Must use: {USAGE[Command.CREATE_PROJECT]}")
        return
    if generator.create_project(args.name):
        state.mark_created()
        _save_state(state, generator.config)


def _create_context(
    args: argparse.Namespace, state: ProjectState, generator: ProjectGenerator
) -> None:
    if not state.project_created:
        print_error("Error: You must create a project first using --create-project.")
        return
    if not args.name:
        print_warning(f"Must use: {USAGE[Command.CREATE_CONTEXT]}")
        return
    generator.create_context(args.name)


def _create_file(
    args: argparse.Namespace, state: ProjectState, generator: ProjectGenerator
) -> None:
    if not state.project_created:
        print_error("Error: You must create a project first using --create-project.")
        return
    if not (args.name and args.context and args.file_type):
        print_warning(f"Must use: {USAGE[Command.CREATE_FILE]}")
        return
    generator.create_file(args.name, args.context, args.file_type)


Handler = Callable[[argparse.Namespace, ProjectState, ProjectGenerator], None]

HANDLERS: dict[Command, Handler] = {
    Command.CREATE_PROJECT: _create_project,
    Command.CREATE_CONTEXT: _create_context,
    Command.CREATE_FILE: _create_file,
}


def dispatch(
    command: Command | None,
    args: argparse.Namespace,
    state: ProjectState,
    generator: ProjectGenerator,
) -> None:
    """Run *command*, refusing anything that is not implemented."""
    if command is None:
        print_usage()
        return
    if not command.implemented:
        print_warning(f"--{command.flag} is not implemented yet.")
        print_usage()
        return
    HANDLERS[command](args, state, generator)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``ddd-skeleton`` and ``python -m ddd_skeleton``."""
    parser = build_parser()
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        print_warning(f"Ignoring unrecognised arguments: {' '.join(unknown)}")

    config = GeneratorConfig.from_env()
    if args.project_root is not None:
        config.project_root = args.project_root
    if args.state_file is not None:
        config.state_path = args.state_file

    state = ProjectState.load(config.state_path)
    dispatch(args.command, args, state, ProjectGenerator(config))


if __name__ == "__main__":
    main()
