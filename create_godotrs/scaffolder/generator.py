"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and generates a Godot project tree next to a Rust
GDExtension crate.  Generation runs four stages strictly in order; the first
failure raises and nothing after it runs:

1. existence check
2. directory creation
3. shared template files (gitignores, ``.gdextension`` descriptor)
4. project initialisation (``project.godot``, ``Cargo.toml``, ``lib.rs``)

There is no rollback.  If a write fails mid-way the partial tree is left on
disk for the caller to inspect or remove.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from create_godotrs.config import ProjectConfig, TemplateVariant
from create_godotrs.errors import ProjectAlreadyExistsError, ProjectIOError

from . import layout
from .templates import (
    CARGO_TOML,
    GDEXT_GIT_URL,
    GODOT_GDEXTENSION,
    GODOT_GITIGNORE,
    GODOT_PROJECT,
    LIB_RS,
    PROJECT_GITIGNORE,
    RUST_GITIGNORE,
    TemplateRenderer,
)


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class ScaffoldResult(BaseModel):
    """What a successful run put on disk."""

    project_path: Path
    template: TemplateVariant
    directories: list[Path] = Field(
        default_factory=list,
        description="Planned directories in plan order; implicit parents are not listed",
    )
    files: list[Path] = Field(default_factory=list, description="Files written, in order")


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Scaffolds one project described by a ``ProjectConfig``.

    The generated tree contains:
    - a root ``.gitignore``
    - ``godot/`` with ``project.godot``, ``rust.gdextension`` and a ``.gitignore``
    - ``rust/`` with ``Cargo.toml``, ``src/lib.rs`` and a ``.gitignore``
    - for the Proto template, empty content-pipeline and UI directories
    """

    # Template name -> destination relative to the project root
    _SHARED_FILES: tuple[tuple[str, str], ...] = (
        (PROJECT_GITIGNORE, ".gitignore"),
        (GODOT_GITIGNORE, "godot/.gitignore"),
        (GODOT_GDEXTENSION, "godot/rust.gdextension"),
        (RUST_GITIGNORE, "rust/.gitignore"),
    )
    _GODOT_FILES: tuple[tuple[str, str], ...] = (
        (GODOT_PROJECT, "godot/project.godot"),
    )
    _RUST_FILES: tuple[tuple[str, str], ...] = (
        (LIB_RS, "rust/src/lib.rs"),
        (CARGO_TOML, "rust/Cargo.toml"),
    )

    def __init__(
        self,
        config: ProjectConfig,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def generate(self) -> ScaffoldResult:
        """Generate the complete project structure.

        Returns:
            A ``ScaffoldResult`` listing every directory and file created.

        Raises:
            ProjectAlreadyExistsError: If ``config.project_path`` is taken.
            ProjectIOError: If any directory or file cannot be created.
        """
        project_root = self.config.project_path
        context = self._build_context()

        # 1. Refuse to touch an existing path
        self._check_not_exists(project_root)

        # 2. Create the directory skeleton
        directories = self._create_directory_structure(project_root)

        # 3. Write the variant-independent template files
        files = self._write_files(project_root, self._SHARED_FILES, context)

        # 4. Initialise the Godot project and the Rust crate
        files += self._initialize_godot_project(project_root, context)
        files += self._initialize_rust_project(project_root, context)

        return ScaffoldResult(
            project_path=project_root,
            template=self.config.template,
            directories=directories,
            files=files,
        )

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the project config."""
        return {
            "project_name": self.config.name,
            "gdext_git_url": GDEXT_GIT_URL,
        }

    # -- Stage 1 -----------------------------------------------------------

    def _check_not_exists(self, root: Path) -> None:
        """Raise if *root* already exists (dangling symlinks included)."""
        try:
            taken = root.exists() or root.is_symlink()
        except OSError as exc:
            raise ProjectIOError(root, exc) from exc
        if taken:
            raise ProjectAlreadyExistsError(root)

    # -- Stage 2 -----------------------------------------------------------

    def _create_directory_structure(self, root: Path) -> list[Path]:
        """Create every planned directory and return them in plan order.

        The root is created without ``parents`` and without ``exist_ok``: if
        another process created it after the existence check this raises
        ``ProjectAlreadyExistsError``, and a missing base directory raises
        ``ProjectIOError`` before anything has been created.
        """
        created: list[Path] = []
        for rel in layout.plan(self.config.template):
            if rel == layout.PROJECT_ROOT:
                _claim_root(root)
                created.append(root)
                continue
            path = root / rel
            try:
                path.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise ProjectIOError(path, exc) from exc
            created.append(path)
        return created

    # -- Stages 3 and 4 ----------------------------------------------------

    def _initialize_godot_project(
        self, root: Path, ctx: dict[str, Any]
    ) -> list[Path]:
        """Write ``project.godot`` with the interpolated project name."""
        return self._write_files(root, self._GODOT_FILES, ctx)

    def _initialize_rust_project(
        self, root: Path, ctx: dict[str, Any]
    ) -> list[Path]:
        """Write the crate manifest and its extension entry point."""
        return self._write_files(root, self._RUST_FILES, ctx)

    def _write_files(
        self,
        root: Path,
        entries: tuple[tuple[str, str], ...],
        ctx: dict[str, Any],
    ) -> list[Path]:
        written: list[Path] = []
        for template_name, rel in entries:
            path = self.renderer.materialize(template_name, root / rel, ctx)
            written.append(path)
        return written


def create_project(config: ProjectConfig) -> ScaffoldResult:
    """Create the project described by *config*.

    Convenience wrapper around ``ProjectGenerator(config).generate()``.
    """
    return ProjectGenerator(config).generate()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _claim_root(root: Path) -> None:
    """Create *root* itself, failing if it already exists."""
    try:
        root.mkdir()
    except FileExistsError as exc:
        raise ProjectAlreadyExistsError(root) from exc
    except OSError as exc:
        raise ProjectIOError(root, exc) from exc
