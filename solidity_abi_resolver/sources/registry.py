"""Registry of import sources, kept in resolver chain order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from ..core.source_base import ResolverSource

SourceFactory = Callable[..., ResolverSource]


@dataclass
class SourceRegistration:
    """A named source and where it sits in the default chain.

    Lower ``position`` values are consulted first; ties keep registration
    order.
    """

    name: str
    factory: SourceFactory
    description: str = ""
    position: int = 100


class SourceRegistry:
    def __init__(self) -> None:
        self._sources: Dict[str, SourceRegistration] = {}

    def register(self, registration: SourceRegistration, *, override: bool = False) -> None:
        if registration.name in self._sources and not override:
            raise ValueError(f"Import source {registration.name!r} is already registered")
        self._sources[registration.name] = registration

    def get(self, name: str) -> SourceRegistration:
        if name not in self._sources:
            known = ", ".join(self.names()) or "none"
            raise KeyError(f"Unknown import source {name!r} (known: {known})")
        return self._sources[name]

    def chain(self) -> List[SourceRegistration]:
        return sorted(self._sources.values(), key=lambda registration: registration.position)

    def names(self) -> Tuple[str, ...]:
        """Source names in the order a default chain tries them."""
        return tuple(registration.name for registration in self.chain())

    def summary(self) -> str:
        """One ``name: description`` line per source, in chain order."""
        return "\n".join(
            f"{registration.name}: {registration.description}" for registration in self.chain()
        )


SOURCE_REGISTRY = SourceRegistry()


def register_source(
    name: str,
    factory: SourceFactory,
    *,
    description: str = "",
    position: int = 100,
    override: bool = False,
) -> None:
    SOURCE_REGISTRY.register(
        SourceRegistration(
            name=name, factory=factory, description=description, position=position
        ),
        override=override,
    )


def resolve_source(name: str) -> SourceRegistration:
    return SOURCE_REGISTRY.get(name)


def default_source_names() -> Tuple[str, ...]:
    """Every registered source, in chain order."""
    return SOURCE_REGISTRY.names()
