"""
Snapshot the configuration of a running world.

A live world exposes its name, environment, seed and structure setting
directly. Its generator has to be looked up, and that lookup is best effort:
a failure leaves the generator unset instead of failing the snapshot.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol

from worldkeeper.core.errors import ResolutionError
from worldkeeper.core.results import SnapshotResult
from worldkeeper.core.utils.logger import log_warning
from worldkeeper.core.world.configuration import WorldConfiguration
from worldkeeper.core.world.generators import (
    GeneratorRegistry,
    GeneratorSource,
    resolve_generator_owner,
)
from worldkeeper.core.world.world_type import WorldType


class LiveWorld(Protocol):
    """Read-only view of a running world."""

    name: str
    environment: Any
    seed: int
    generate_structures: bool
    generator: Optional[Any]


def snapshot_live_world(
    world: LiveWorld,
    registry: GeneratorRegistry,
    sources: Optional[Iterable[GeneratorSource]] = None,
) -> SnapshotResult:
    """
    Build a configuration from a running world.

    The generator argument is never set here; it cannot be recovered from a
    running world and is only known from a stored configuration.

    Raises:
        ValidationError: If the world has no name
    """
    builder = (
        WorldConfiguration.builder()
        .set_name(world.name)
        .set_type(WorldType.from_environment(world.environment))
        .set_seed(world.seed)
        .set_generate_structures(world.generate_structures)
    )
    resolution_error = None
    try:
        builder.set_generator(resolve_generator_owner(world, registry, sources))
    except Exception as e:
        resolution_error = ResolutionError(
            f"Could not resolve generator for world '{world.name}': {e}",
            world_name=world.name,
        )
        resolution_error.__cause__ = e
    return SnapshotResult(record=builder.build(), resolution_error=resolution_error)


def snapshot_world(
    world: LiveWorld,
    registry: GeneratorRegistry,
    sources: Optional[Iterable[GeneratorSource]] = None,
) -> WorldConfiguration:
    """Snapshot a running world, logging a failed generator lookup."""
    result = snapshot_live_world(world, registry, sources)
    if result.resolution_error is not None:
        log_warning(
            "live",
            str(result.resolution_error),
            context=repr(result.resolution_error.__cause__),
        )
    return result.record
