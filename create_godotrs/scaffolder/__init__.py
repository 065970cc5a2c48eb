"""create-godotrs scaffolder -- generates Godot + Rust GDExtension projects.

Takes a ``ProjectConfig`` and writes a fresh project directory containing a
Godot project under ``godot/`` and a GDExtension crate under ``rust/``.

Quick usage::

    from create_godotrs.config import ProjectConfig, TemplateVariant
    from create_godotrs.scaffolder import create_project

    config = ProjectConfig(name="mygame", template=TemplateVariant.PROTO)
    result = create_project(config)
    print(result.project_path)
"""

from create_godotrs.scaffolder.generator import (
    ProjectGenerator,
    ScaffoldResult,
    create_project,
)
from create_godotrs.scaffolder.layout import plan
from create_godotrs.scaffolder.templates import TemplateRenderer, TemplateStore

__all__ = [
    "ProjectGenerator",
    "ScaffoldResult",
    "TemplateRenderer",
    "TemplateStore",
    "create_project",
    "plan",
]
