"""Exceptions raised by the rename engine."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .conflicts import Conflict


class RenamerError(Exception):
    """Base class for all engine errors."""
    pass


class ConfigError(RenamerError):
    """Exception raised for invalid engine configuration."""
    pass


class FileError(RenamerError):
    """A problem with one file. The file is skipped, the batch goes on."""

    reason = "cannot be renamed"

    def __init__(self, filename: str, message: str | None = None):
        self.filename = filename
        super().__init__(message or f"{filename}: {self.reason}")


class NoEpisodeMarker(FileError):
    """No SxxExx or Exx marker found in the filename."""
    reason = "no season/episode marker found"


class MissingSeason(FileError):
    """Only an episode marker was found and no season was supplied."""
    reason = "season number missing"


class MalformedExtension(FileError):
    """The filename has no usable extension."""
    reason = "missing file extension"


class ConflictError(RenamerError):
    """Two plans share a target, or a target already exists on disk.

    Carries every conflict found so they can be reported together.
    """

    def __init__(self, conflicts: list[Conflict]):
        self.conflicts = list(conflicts)
        lines = "\n".join(f"- {c.describe()}" for c in self.conflicts)
        super().__init__(f"{len(self.conflicts)} conflict(s) detected:\n{lines}")
