"""
Pydantic schema for world configuration files.

Field names are the stable on-disk identifiers. Unknown keys are ignored and
missing or null values fall back to their defaults, so files written by older
or newer versions still load.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from worldkeeper.core.world.configuration import SEED_MAX, SEED_MIN
from worldkeeper.core.world.world_type import WorldType


def _flag_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


class WorldConfigDocument(BaseModel):
    """Schema for ``<world>.json`` configuration files."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    type: WorldType = WorldType.NORMAL
    settings: str = ""
    seed: int = Field(0, ge=SEED_MIN, le=SEED_MAX)
    generateStructures: bool = True
    generator: Optional[str] = None
    generatorArg: Optional[str] = None
    loaded: bool = True
    flags: Dict[str, str] = Field(default_factory=dict)

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, value: Any) -> WorldType:
        if value is None:
            return WorldType.NORMAL
        return WorldType.parse(value)

    @field_validator("settings", mode="before")
    @classmethod
    def default_settings(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("seed", mode="before")
    @classmethod
    def check_seed(cls, value: Any) -> Any:
        if value is None:
            return 0
        if isinstance(value, bool):
            raise ValueError("seed must be an integer, not a boolean")
        return value

    @field_validator("generateStructures", "loaded", mode="before")
    @classmethod
    def default_true(cls, value: Any) -> Any:
        return True if value is None else value

    @field_validator("flags", mode="before")
    @classmethod
    def normalize_flags(cls, value: Any) -> Any:
        # null entries mean "unset" and are never stored
        if value is None:
            return {}
        if isinstance(value, dict):
            return {
                str(key): _flag_value(item)
                for key, item in value.items()
                if item is not None
            }
        return value

    def to_storage(self) -> Dict[str, Any]:
        """Return the JSON-ready document, omitting an absent generator."""
        return self.model_dump(mode="json", exclude_none=True)
