"""
World configuration records and the ways of creating them.
"""

from .world_type import WorldType
from .configuration import WorldConfiguration
from .builder import WorldConfigurationBuilder
from .generators import (
    GeneratorRegistry,
    GeneratorSource,
    attached_generator_source,
    default_generator_sources,
    registered_generator_source,
    resolve_generator_owner,
)
from .live import LiveWorld, snapshot_live_world, snapshot_world

__all__ = [
    "GeneratorRegistry",
    "GeneratorSource",
    "LiveWorld",
    "WorldConfiguration",
    "WorldConfigurationBuilder",
    "WorldType",
    "attached_generator_source",
    "default_generator_sources",
    "registered_generator_source",
    "resolve_generator_owner",
    "snapshot_live_world",
    "snapshot_world",
]
