"""create-godotrs configuration.

Typed, immutable description of the project to scaffold. The model uses
Pydantic v2 so template names are validated at construction time and a
configuration can never be mutated halfway through a run.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from create_godotrs.errors import InvalidTemplateError


class TemplateVariant(str, Enum):
    """Scaffold layouts that can be selected at generation time."""

    BASIC = "basic"
    PROTO = "proto"

    @classmethod
    def choices(cls) -> list[str]:
        """Return the accepted template names, in declaration order."""
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value: Any) -> "TemplateVariant":
        """Resolve *value* to a variant.

        Accepts an existing ``TemplateVariant`` or one of the literal names
        ``"basic"`` / ``"proto"``.

        Raises:
            InvalidTemplateError: If *value* names no known variant.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        raise InvalidTemplateError(value, cls.choices())


class ProjectConfig(BaseModel):
    """What to create and where.

    The project name is taken as-is and used as a single path segment; the
    only validation performed is on the template variant.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name, used as the directory name")
    base_path: Path = Field(
        default_factory=Path.cwd,
        description="Directory the project folder is created in",
    )
    template: TemplateVariant = Field(
        default=TemplateVariant.BASIC,
        description="Scaffold layout to generate",
    )

    @field_validator("template", mode="before")
    @classmethod
    def _parse_template(cls, value: Any) -> TemplateVariant:
        # InvalidTemplateError escapes pydantic unwrapped (not a ValueError).
        return TemplateVariant.parse(value)

    @property
    def project_path(self) -> Path:
        """Final location of the generated project (``base_path / name``)."""
        return self.base_path / self.name

    def with_base_path(self, path: str | Path) -> "ProjectConfig":
        """Return a copy of this config rooted at *path*."""
        return self.model_copy(update={"base_path": Path(path)})

    def with_template(self, template: TemplateVariant | str) -> "ProjectConfig":
        """Return a copy of this config using *template*."""
        return self.model_copy(update={"template": TemplateVariant.parse(template)})
