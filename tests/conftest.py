"""Shared pytest fixtures for the create-godotrs test suite.

Provides reusable fixtures for:
- An empty, writable base directory to scaffold into
- ProjectConfig factories for both template variants
- Snapshotting a directory tree so tests can assert nothing changed
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from create_godotrs.config import ProjectConfig, TemplateVariant


# ---------------------------------------------------------------------------
# Expected trees
# ---------------------------------------------------------------------------

BASIC_DIRS: frozenset[str] = frozenset({
    "godot",
    "rust",
    "rust/src",
})

BASIC_FILES: frozenset[str] = frozenset({
    ".gitignore",
    "godot/.gitignore",
    "godot/rust.gdextension",
    "godot/project.godot",
    "rust/.gitignore",
    "rust/Cargo.toml",
    "rust/src/lib.rs",
})

PROTO_EXTRA_DIRS: frozenset[str] = frozenset({
    "godot/addons",
    "godot/addons/AsepriteWizard",
    "godot/addons/ldtk-importer",
    "godot/entity",
    "godot/pipeline",
    "godot/pipeline/aseprite",
    "godot/pipeline/ldtk",
    "godot/player",
    "godot/ui",
})


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def base_dir(tmp_path: Path) -> Iterator[Path]:
    """Empty directory that projects are generated into (auto-cleanup)."""
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    yield workspace


# ---------------------------------------------------------------------------
# Configs
# ---------------------------------------------------------------------------


@pytest.fixture
def make_config(base_dir: Path) -> Callable[..., ProjectConfig]:
    """Factory for ``ProjectConfig`` objects rooted at ``base_dir``."""

    def _make(
        name: str = "mygame",
        template: TemplateVariant | str = TemplateVariant.BASIC,
    ) -> ProjectConfig:
        return ProjectConfig(name=name, base_path=base_dir, template=template)

    return _make


@pytest.fixture
def basic_config(make_config) -> ProjectConfig:
    """Basic-template config for a project called ``mygame``."""
    return make_config("mygame", TemplateVariant.BASIC)


@pytest.fixture
def proto_config(make_config) -> ProjectConfig:
    """Proto-template config for a project called ``mygame``."""
    return make_config("mygame", TemplateVariant.PROTO)


# ---------------------------------------------------------------------------
# Tree helpers
# ---------------------------------------------------------------------------


def snapshot_tree(root: Path) -> dict[str, bytes | None]:
    """Map every entry under *root* to its bytes (``None`` for directories)."""
    snapshot: dict[str, bytes | None] = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        snapshot[rel] = None if path.is_dir() else path.read_bytes()
    return snapshot


def split_tree(root: Path) -> tuple[set[str], set[str]]:
    """Return ``(directories, files)`` under *root* as relative POSIX paths."""
    dirs: set[str] = set()
    files: set[str] = set()
    for path in root.rglob("*"):
        rel = path.relative_to(root).as_posix()
        (dirs if path.is_dir() else files).add(rel)
    return dirs, files
