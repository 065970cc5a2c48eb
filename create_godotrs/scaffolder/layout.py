"""Directory layout for each template variant.

Paths are POSIX-style and relative to the project root; ``"."`` is the root
itself.  Every entry's ancestors either precede it in the plan or are created
implicitly by recursive directory creation.
"""

from __future__ import annotations

from create_godotrs.config import TemplateVariant


PROJECT_ROOT = "."
GODOT_DIR = "godot"
RUST_DIR = "rust"
RUST_SRC_DIR = "rust/src"

BASIC_DIRECTORIES: tuple[str, ...] = (
    PROJECT_ROOT,
    GODOT_DIR,
    RUST_SRC_DIR,
)

# Content-pipeline and UI scaffolding for prototypes
PROTO_DIRECTORIES: tuple[str, ...] = (
    "godot/addons/AsepriteWizard",
    "godot/addons/ldtk-importer",
    "godot/entity",
    "godot/pipeline/aseprite",
    "godot/pipeline/ldtk",
    "godot/player",
    "godot/ui",
)


def plan(variant: TemplateVariant) -> tuple[str, ...]:
    """Return the ordered directories to create for *variant*."""
    if variant is TemplateVariant.PROTO:
        return BASIC_DIRECTORIES + PROTO_DIRECTORIES
    return BASIC_DIRECTORIES
