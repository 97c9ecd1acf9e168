"""Minimal views of cluster objects used by the executor."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class Container:
    name: str
    image: str


@dataclass(slots=True, frozen=True)
class Pod:
    """A pod and the containers declared in its spec."""

    name: str
    namespace: str
    containers: tuple[Container, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "containers", tuple(self.containers))
