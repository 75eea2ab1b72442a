"""Builder for WorldConfiguration records."""

from __future__ import annotations

from typing import Optional, Union

from worldkeeper.core.errors import ValidationError
from worldkeeper.core.world.configuration import SEED_MAX, SEED_MIN, WorldConfiguration
from worldkeeper.core.world.world_type import WorldType


class WorldConfigurationBuilder:
    """
    Accumulates the creation parameters of a world.

    Setters only store the value and return the builder, so calls can be
    chained in any order; the last write wins. Values are checked once, in
    ``build()``.
    """

    def __init__(self) -> None:
        self._name: str = ""
        self._type: Union[WorldType, str] = WorldType.NORMAL
        self._settings: str = ""
        self._seed: int = 0
        self._generate_structures: bool = True
        self._generator: Optional[str] = None
        self._generator_arg: Optional[str] = None

    def set_name(self, name: str) -> "WorldConfigurationBuilder":
        self._name = name
        return self

    def set_type(self, world_type: Union[WorldType, str]) -> "WorldConfigurationBuilder":
        self._type = world_type
        return self

    def set_settings(self, settings: str) -> "WorldConfigurationBuilder":
        self._settings = settings
        return self

    def set_seed(self, seed: int) -> "WorldConfigurationBuilder":
        self._seed = seed
        return self

    def set_generate_structures(self, generate_structures: bool) -> "WorldConfigurationBuilder":
        self._generate_structures = generate_structures
        return self

    def set_generator(self, generator: Optional[str]) -> "WorldConfigurationBuilder":
        self._generator = generator
        return self

    def set_generator_arg(self, generator_arg: Optional[str]) -> "WorldConfigurationBuilder":
        self._generator_arg = generator_arg
        return self

    def build(self) -> WorldConfiguration:
        """
        Create the configuration.

        The new record is loaded and has no flags.

        Raises:
            ValidationError: If the name is missing or empty, the type is not a
                known world type, or the seed is not a 64-bit integer
        """
        if not self._name or not isinstance(self._name, str):
            raise ValidationError("World name must be a non-empty string", field="name")
        try:
            world_type = WorldType.parse(self._type)
        except ValueError as e:
            raise ValidationError(str(e), field="type") from e
        if isinstance(self._seed, bool) or not isinstance(self._seed, int):
            raise ValidationError(
                f"Seed must be an integer, got {type(self._seed).__name__}", field="seed"
            )
        if not SEED_MIN <= self._seed <= SEED_MAX:
            raise ValidationError(
                f"Seed {self._seed} does not fit in a signed 64-bit integer", field="seed"
            )
        return WorldConfiguration(
            name=self._name,
            type=world_type,
            settings=self._settings if self._settings is not None else "",
            seed=self._seed,
            generate_structures=bool(self._generate_structures),
            generator=self._generator,
            generator_arg=self._generator_arg,
        )
