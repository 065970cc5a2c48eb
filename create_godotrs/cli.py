"""Command-line entry point for create-godotrs.

Parses arguments, runs the scaffolder and maps each failure kind to its own
exit code.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from create_godotrs.config import ProjectConfig, TemplateVariant
from create_godotrs.errors import (
    CreateError,
    InvalidTemplateError,
    ProjectAlreadyExistsError,
    ProjectIOError,
)
from create_godotrs.scaffolder import ScaffoldResult, create_project
from create_godotrs.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    relative_to_root,
)

# argparse itself exits with 2 on usage errors
EXIT_OK = 0
EXIT_CODES: dict[type[CreateError], int] = {
    ProjectAlreadyExistsError: 3,
    ProjectIOError: 4,
    InvalidTemplateError: 5,
}
EXIT_UNKNOWN_ERROR = 1


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``create-godotrs``."""
    parser = argparse.ArgumentParser(
        prog="create-godotrs",
        description="Create a new Godot project with Rust",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-godotrs mygame\n"
            "  create-godotrs mygame --template proto\n"
            "  create-godotrs mygame --path ~/projects\n"
        ),
    )

    parser.add_argument(
        "name",
        help="Name of the project to create",
    )
    parser.add_argument(
        "--template", "-t",
        default=TemplateVariant.BASIC.value,
        metavar="{" + ",".join(TemplateVariant.choices()) + "}",
        help="Scaffold template (default: basic)",
    )
    parser.add_argument(
        "--path", "-p",
        default=None,
        help="Directory to create the project in (default: current directory)",
    )
    return parser


def exit_code_for(error: CreateError) -> int:
    """Return the process exit code for *error*."""
    for error_type, code in EXIT_CODES.items():
        if isinstance(error, error_type):
            return code
    return EXIT_UNKNOWN_ERROR


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``create-godotrs`` / ``python -m create_godotrs``."""
    args = build_parser().parse_args(argv)

    try:
        template = TemplateVariant.parse(args.template)
        config = ProjectConfig(name=args.name, template=template)
        if args.path is not None:
            config = config.with_base_path(Path(args.path).expanduser())
        result = create_project(config)
    except CreateError as exc:
        print_error(f"could not create project: {exc}")
        return exit_code_for(exc)

    _report(config, result)
    return EXIT_OK


def _report(config: ProjectConfig, result: ScaffoldResult) -> None:
    print_success(f"Successfully created project: {config.name}")
    console.print(
        f"Project location: {result.project_path}", markup=False, soft_wrap=True
    )
    console.print()
    created = {
        relative_to_root(path, result.project_path): "file"
        for path in result.files
    }
    print_summary_table(created, title=f"{result.template.value} template")


if __name__ == "__main__":
    sys.exit(main())
