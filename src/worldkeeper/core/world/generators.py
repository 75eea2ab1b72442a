"""
Generator lookup for live worlds.

The generator of a running world is found by trying an ordered list of
sources; the first one returning a generator wins. The generator is then
mapped back to the name of the plugin that owns it through the host's
generator registry.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, Protocol


class GeneratorRegistry(Protocol):
    """Host registry mapping world names and generators to their owners."""

    def lookup_registered_generator(self, world_name: str) -> Optional[Any]:
        ...

    def reverse_resolve_owner(self, generator: Any) -> Optional[str]:
        ...


GeneratorSource = Callable[[Any], Optional[Any]]


def registered_generator_source(registry: GeneratorRegistry) -> GeneratorSource:
    """Source returning the generator registered against the world's name."""

    def source(world: Any) -> Optional[Any]:
        return registry.lookup_registered_generator(world.name)

    return source


def attached_generator_source(world: Any) -> Optional[Any]:
    """Source returning the generator the running world reports."""
    return getattr(world, "generator", None)


def default_generator_sources(registry: GeneratorRegistry) -> List[GeneratorSource]:
    return [registered_generator_source(registry), attached_generator_source]


def find_generator(world: Any, sources: Iterable[GeneratorSource]) -> Optional[Any]:
    for source in sources:
        generator = source(world)
        if generator is not None:
            return generator
    return None


def resolve_generator_owner(
    world: Any,
    registry: GeneratorRegistry,
    sources: Optional[Iterable[GeneratorSource]] = None,
) -> Optional[str]:
    """
    Return the owner name of the world's generator, or None if there is none.

    Exceptions from the sources or the registry propagate to the caller.
    """
    chain = default_generator_sources(registry) if sources is None else sources
    generator = find_generator(world, chain)
    if generator is None:
        return None
    owner = registry.reverse_resolve_owner(generator)
    return owner or None
