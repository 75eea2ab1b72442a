"""World configuration storage: schema and JSON persistence."""

from .schema import WorldConfigDocument
from .persistence import (
    CONFIG_SUFFIX,
    WorldConfigCodec,
    get_world_config_path,
    load_world_config,
    load_world_configs,
    save_world_config,
)

__all__ = [
    "CONFIG_SUFFIX",
    "WorldConfigCodec",
    "WorldConfigDocument",
    "get_world_config_path",
    "load_world_config",
    "load_world_configs",
    "save_world_config",
]
