"""
World configuration record.

A WorldConfiguration holds the creation parameters of a world (name, type,
generator settings, seed, structure generation, generator and its argument)
together with its runtime state (loaded flag and free-form string flags).

Creation parameters are fixed once the record exists; only ``loaded`` and
``flags`` change afterwards. Records are built either through
``WorldConfiguration.builder()``, snapshotted from a running world
(see ``worldkeeper.core.world.live``) or decoded from storage
(see ``worldkeeper.core.config.persistence``).
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

from pydantic import ValidationError as SchemaError

from worldkeeper.core.errors import PersistenceError
from worldkeeper.core.world.world_type import WorldType

if TYPE_CHECKING:
    from worldkeeper.core.world.builder import WorldConfigurationBuilder


SEED_MIN = -(2**63)
SEED_MAX = 2**63 - 1

_CREATION_FIELDS = frozenset(
    {
        "name",
        "type",
        "settings",
        "seed",
        "generate_structures",
        "generator",
        "generator_arg",
    }
)


def _flag_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)


@dataclass
class WorldConfiguration:
    """Persisted configuration of a single world."""

    name: str
    type: WorldType = WorldType.NORMAL
    settings: str = ""
    seed: int = 0
    generate_structures: bool = True
    generator: Optional[str] = None
    generator_arg: Optional[str] = None
    loaded: bool = True
    flags: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # flags is always a usable dict without None values, whatever the caller passed
        raw_flags = self.flags or {}
        self.flags = {
            str(key): _flag_text(value)
            for key, value in raw_flags.items()
            if value is not None
        }
        self.type = WorldType.parse(self.type)
        if self.settings is None:
            self.settings = ""
        object.__setattr__(self, "_sealed", True)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _CREATION_FIELDS and getattr(self, "_sealed", False):
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    @staticmethod
    def builder() -> "WorldConfigurationBuilder":
        """Start building a new configuration."""
        from worldkeeper.core.world.builder import WorldConfigurationBuilder

        return WorldConfigurationBuilder()

    # --- runtime state -------------------------------------------------

    def is_loaded(self) -> bool:
        return self.loaded

    def set_loaded(self, loaded: bool) -> None:
        self.loaded = loaded

    def set_flag(self, key: str, value: Optional[Any]) -> None:
        """
        Set a flag, or remove it when ``value`` is None.

        Values are stored as strings, booleans as ``"true"``/``"false"``,
        matching what a saved file holds. Removing a flag that is not set is
        a no-op.
        """
        if value is None:
            self.flags.pop(key, None)
        else:
            self.flags[key] = _flag_text(value)

    def get_flag(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.flags.get(key, default)

    # --- storage mapping -----------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return the storage document for this record."""
        data: Dict[str, Any] = {
            "name": self.name,
            "type": self.type.value,
            "settings": self.settings,
            "seed": self.seed,
            "generateStructures": self.generate_structures,
        }
        if self.generator is not None:
            data["generator"] = self.generator
        if self.generator_arg is not None:
            data["generatorArg"] = self.generator_arg
        data["loaded"] = self.loaded
        data["flags"] = dict(self.flags)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorldConfiguration":
        """
        Create a record from a storage document.

        Unknown keys are ignored and missing keys take their defaults.

        Raises:
            PersistenceError: If the document does not describe a valid world
        """
        from worldkeeper.core.config.schema import WorldConfigDocument

        if not isinstance(data, dict):
            raise PersistenceError(
                f"Expected a JSON object, got {type(data).__name__}"
            )
        try:
            document = WorldConfigDocument.model_validate(data)
        except SchemaError as e:
            raise PersistenceError(
                f"Invalid world configuration: {e.error_count()} error(s)",
                context={"errors": e.errors(include_url=False)},
            ) from e
        return cls(
            name=document.name,
            type=document.type,
            settings=document.settings,
            seed=document.seed,
            generate_structures=document.generateStructures,
            generator=document.generator,
            generator_arg=document.generatorArg,
            loaded=document.loaded,
            flags=document.flags,
        )
