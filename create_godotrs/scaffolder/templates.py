"""Embedded template content and Jinja2 rendering for project scaffolding.

All template text lives in this module, so generating a project never
depends on files shipped next to the package.  ``TemplateStore`` is the
read-only lookup over that content; ``TemplateRenderer`` wraps a Jinja2
environment around the store and writes entries to disk.

Entries whose logical name ends in ``.j2`` are rendered with the project
context before being written; every other entry is written byte-for-byte.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined, select_autoescape

from create_godotrs.errors import ProjectIOError


# ---------------------------------------------------------------------------
# Logical template names
# ---------------------------------------------------------------------------

PROJECT_GITIGNORE = "Project.gitignore"
GODOT_GITIGNORE = "Godot.gitignore"
RUST_GITIGNORE = "Rust.gitignore"
GODOT_GDEXTENSION = "rust.gdextension.j2"
GODOT_PROJECT = "project.godot.j2"
CARGO_TOML = "Cargo.toml.j2"
LIB_RS = "lib.rs.j2"

GDEXT_GIT_URL = "https://github.com/godot-rust/gdext"

# Rust keywords plus package names cargo refuses
RESERVED_CRATE_NAMES: frozenset[str] = frozenset({
    "abstract", "as", "async", "await", "become", "box", "break", "const",
    "continue", "crate", "do", "dyn", "else", "enum", "extern", "false",
    "final", "fn", "for", "gen", "if", "impl", "in", "let", "loop", "macro",
    "match", "mod", "move", "mut", "override", "priv", "pub", "ref",
    "return", "self", "static", "struct", "super", "trait", "true", "try",
    "type", "typeof", "unsafe", "unsized", "use", "virtual", "where",
    "while", "yield",
    "alloc", "core", "proc_macro", "std", "test", "build", "deps",
    "examples", "incremental", "godot",
})


# ---------------------------------------------------------------------------
# Template content
# ---------------------------------------------------------------------------

_PROJECT_GITIGNORE_TEXT = """\
# Editor and OS files
.DS_Store
Thumbs.db
.idea/
.vscode/
*.swp
*~
"""

_GODOT_GITIGNORE_TEXT = """\
# Godot 4+ specific ignores
.godot/
/android/

# Imported translations (automatically generated from CSV files)
*.translation

# Export presets may contain credentials
export.cfg
export_presets.cfg

# Mono-specific ignores
.mono/
data_*/
mono_crash.*.json
"""

_RUST_GITIGNORE_TEXT = """\
# Cargo build output
/target

# rustfmt backups
**/*.rs.bk
"""

_GODOT_GDEXTENSION_TEXT = """\
[configuration]
entry_symbol = "gdext_rust_init"
compatibility_minimum = 4.1
reloadable = true

[libraries]
linux.debug.x86_64 = "res://../rust/target/debug/lib{{ project_name | crate_name }}.so"
linux.release.x86_64 = "res://../rust/target/release/lib{{ project_name | crate_name }}.so"
windows.debug.x86_64 = "res://../rust/target/debug/{{ project_name | crate_name }}.dll"
windows.release.x86_64 = "res://../rust/target/release/{{ project_name | crate_name }}.dll"
macos.debug = "res://../rust/target/debug/lib{{ project_name | crate_name }}.dylib"
macos.release = "res://../rust/target/release/lib{{ project_name | crate_name }}.dylib"
macos.debug.arm64 = "res://../rust/target/debug/lib{{ project_name | crate_name }}.dylib"
macos.release.arm64 = "res://../rust/target/release/lib{{ project_name | crate_name }}.dylib"
"""

_GODOT_PROJECT_TEXT = """\
; Engine configuration file.
; It's best edited using the editor UI and not directly,
; since the parameters that go here are not all obvious.

config_version=5

[application]

config/name="{{ project_name | escape_quotes }}-godot"
"""

_CARGO_TOML_TEXT = """\
[package]
name = "{{ project_name | crate_name }}"
version = "0.1.0"
edition = "2024"
description = "GDExtension library for {{ project_name | escape_quotes }}"

[lib]
crate-type = ["cdylib"]

[dependencies]
godot = { git = "{{ gdext_git_url }}" }

[profile.dev]
opt-level = 1
[profile.dev.package."*"]
opt-level = 1
"""

_LIB_RS_TEXT = """\
//! GDExtension entry point for {{ project_name }}.

use godot::prelude::*;

struct {{ project_name | pascal_case }}Extension;

#[gdextension]
unsafe impl ExtensionLibrary for {{ project_name | pascal_case }}Extension {}
"""


# ---------------------------------------------------------------------------
# TemplateStore
# ---------------------------------------------------------------------------


class TemplateStore:
    """Read-only mapping from logical template name to raw content."""

    _ENTRIES: Mapping[str, str] = MappingProxyType({
        PROJECT_GITIGNORE: _PROJECT_GITIGNORE_TEXT,
        GODOT_GITIGNORE: _GODOT_GITIGNORE_TEXT,
        RUST_GITIGNORE: _RUST_GITIGNORE_TEXT,
        GODOT_GDEXTENSION: _GODOT_GDEXTENSION_TEXT,
        GODOT_PROJECT: _GODOT_PROJECT_TEXT,
        CARGO_TOML: _CARGO_TOML_TEXT,
        LIB_RS: _LIB_RS_TEXT,
    })

    @classmethod
    def get(cls, name: str) -> str:
        """Return the raw content for *name*.

        Raises:
            KeyError: If *name* is not an embedded template.
        """
        return cls._ENTRIES[name]

    @classmethod
    def names(cls) -> list[str]:
        """Return all logical template names, sorted."""
        return sorted(cls._ENTRIES)

    @classmethod
    def as_mapping(cls) -> Mapping[str, str]:
        """Return the underlying read-only mapping."""
        return cls._ENTRIES

    @staticmethod
    def is_template(name: str) -> bool:
        """Return ``True`` if *name* needs rendering before being written."""
        return name.endswith(".j2")


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders embedded templates and writes them into a project tree."""

    def __init__(self, store: type[TemplateStore] = TemplateStore) -> None:
        self.store = store
        self.env = Environment(
            loader=DictLoader(dict(store.as_mapping())),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["crate_name"] = crate_name
        self.env.filters["pascal_case"] = _pascal_case_filter
        self.env.filters["escape_quotes"] = _escape_quotes_filter

    def render(self, name: str, context: dict[str, Any]) -> str:
        """Return the content of *name* ready to be written.

        Plain entries come back unchanged; ``.j2`` entries are rendered with
        *context*.
        """
        if not self.store.is_template(name):
            return self.store.get(name)
        template = self.env.get_template(name)
        return template.render(**context)

    def materialize(
        self,
        name: str,
        destination: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Write entry *name* to *destination* and return the written path.

        The parent directory must already exist.

        Raises:
            ProjectIOError: If the file cannot be written.
        """
        content = self.render(name, context)
        out = Path(destination)
        try:
            out.write_bytes(content.encode("utf-8"))
        except OSError as exc:
            raise ProjectIOError(out, exc) from exc
        return out


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------


def crate_name(value: str) -> str:
    """Convert a project name into a Rust crate/library identifier.

    ``"My Game"`` -> ``"my_game"``, ``"2d-demo"`` -> ``"gd_2d_demo"``,
    ``"self"`` -> ``"gd_self"``.
    """
    ident = re.sub(r"[^a-z0-9]+", "_", value.lower()).strip("_")
    if not ident:
        return "gd_extension"
    if ident[0].isdigit() or ident in RESERVED_CRATE_NAMES:
        ident = f"gd_{ident}"
    return ident


def _pascal_case_filter(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    parts = re.split(r"[^A-Za-z0-9]+", value)
    pascal = "".join(word[:1].upper() + word[1:] for word in parts if word)
    if not pascal or pascal[0].isdigit():
        pascal = f"Gd{pascal}"
    return pascal


def _escape_quotes_filter(value: str) -> str:
    """Escape *value* for a double-quoted TOML or Godot config string."""
    return value.replace("\\", "\\\\").replace('"', '\\"')
