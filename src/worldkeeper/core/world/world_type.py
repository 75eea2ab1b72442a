"""World type tags stored in configuration files."""

from __future__ import annotations

from enum import Enum
from typing import Any


# Environment tags reported by a running world that don't share a name with
# a WorldType member.
_ENVIRONMENT_ALIASES = {
    "THE_END": "END",
}


class WorldType(Enum):
    """Closed set of world types a configuration can describe."""

    NORMAL = "NORMAL"
    FLAT = "FLAT"
    VOID = "VOID"
    AMPLIFIED = "AMPLIFIED"
    NETHER = "NETHER"
    END = "END"
    CUSTOM = "CUSTOM"

    @classmethod
    def parse(cls, value: Any) -> "WorldType":
        """
        Parse a stored type tag, case-insensitively.

        Raises:
            ValueError: If the tag is not a known world type
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().upper()
            if normalized in cls.__members__:
                return cls[normalized]
        raise ValueError(
            f"Unknown world type {value!r}; expected one of: {', '.join(cls.__members__)}"
        )

    @classmethod
    def from_environment(cls, environment: Any) -> "WorldType":
        """
        Map the environment reported by a live world to a world type.

        Accepts an enum member from the host (its name is used) or a plain
        string. Unrecognised environments map to NORMAL.
        """
        if isinstance(environment, cls):
            return environment
        if isinstance(environment, Enum):
            environment = environment.name
        if not isinstance(environment, str):
            return cls.NORMAL
        normalized = environment.strip().upper()
        normalized = _ENVIRONMENT_ALIASES.get(normalized, normalized)
        return cls.__members__.get(normalized, cls.NORMAL)
