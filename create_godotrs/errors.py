"""Exceptions raised while scaffolding a project.

Every failure surfaced by the scaffolder is a ``CreateError`` subclass, so
callers can catch the whole family with one ``except`` clause and still tell
the kinds apart by type.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class CreateError(Exception):
    """Base class for every project-creation failure."""


class ProjectAlreadyExistsError(CreateError):
    """Raised when the target project path is already taken."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"Project directory already exists: {self.path}")


class ProjectIOError(CreateError):
    """Raised when creating a directory or writing a file fails.

    The originating ``OSError`` is chained as ``__cause__`` and also kept on
    :attr:`cause` for callers that want to inspect ``errno``.
    """

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = Path(path)
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"IO error at {self.path}: {reason}")


class InvalidTemplateError(CreateError):
    """Raised when a template variant name is not recognised."""

    def __init__(self, value: object, choices: Iterable[str] = ()) -> None:
        self.value = value
        self.choices = tuple(choices)
        message = f"Unknown template: {value!r}"
        if self.choices:
            message += f" (choose from: {', '.join(self.choices)})"
        super().__init__(message)
