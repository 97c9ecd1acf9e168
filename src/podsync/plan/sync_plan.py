"""SyncPlan model."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .intersect import SyncMap


@dataclass(slots=True, frozen=True)
class SyncPlan:
    """
    Files to push into, and remove from, every container running `image`.

    Built for one change batch and applied once. The maps are read-only.
    """

    image: str
    copy: SyncMap = field(default_factory=dict)
    delete: SyncMap = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "copy", _freeze(self.copy))
        object.__setattr__(self, "delete", _freeze(self.delete))

    @property
    def is_empty(self) -> bool:
        return not self.copy and not self.delete

    def file_count(self) -> int:
        return len(self.copy) + len(self.delete)


def _freeze(sync_map: Mapping[str, object]) -> SyncMap:
    return MappingProxyType({src: tuple(dsts) for src, dsts in sync_map.items()})  # type: ignore[arg-type]
