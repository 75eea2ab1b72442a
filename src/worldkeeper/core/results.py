"""
Result envelopes for world configuration operations.

Loading, saving and snapshotting report recoverable failures through these
objects instead of raising or logging.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal, Optional

from worldkeeper.core.errors import PersistenceError, ResolutionError

if TYPE_CHECKING:
    from worldkeeper.core.world.configuration import WorldConfiguration


LoadStatus = Literal["loaded", "missing", "failed"]


@dataclass(frozen=True)
class LoadResult:
    """Outcome of reading a configuration file."""

    path: Path
    status: LoadStatus
    record: Optional["WorldConfiguration"] = None
    error: Optional[PersistenceError] = None

    @property
    def ok(self) -> bool:
        return self.status == "loaded"

    @classmethod
    def loaded(cls, path: Path, record: "WorldConfiguration") -> "LoadResult":
        return cls(path=path, status="loaded", record=record)

    @classmethod
    def missing(cls, path: Path) -> "LoadResult":
        return cls(path=path, status="missing")

    @classmethod
    def failed(cls, path: Path, error: PersistenceError) -> "LoadResult":
        return cls(path=path, status="failed", error=error)


@dataclass(frozen=True)
class SaveResult:
    """Outcome of writing a configuration file."""

    path: Path
    error: Optional[PersistenceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class SnapshotResult:
    """A configuration taken from a live world, with any generator lookup failure."""

    record: "WorldConfiguration"
    resolution_error: Optional[ResolutionError] = None

    @property
    def complete(self) -> bool:
        return self.resolution_error is None
