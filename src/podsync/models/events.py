"""Filesystem change batch produced by the watcher."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class ChangeEvents:
    """
    One batch of host filesystem changes.

    Paths are host paths as reported by the watcher; they are made relative to
    the artifact workspace during planning.
    """

    added: tuple[str, ...] = field(default_factory=tuple)
    modified: tuple[str, ...] = field(default_factory=tuple)
    deleted: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any sequence from callers but store tuples.
        object.__setattr__(self, "added", tuple(self.added))
        object.__setattr__(self, "modified", tuple(self.modified))
        object.__setattr__(self, "deleted", tuple(self.deleted))

    def has_changed(self) -> bool:
        return bool(self.added or self.modified or self.deleted)

    def changed(self) -> tuple[str, ...]:
        """Added then modified paths (the files to copy)."""
        return self.added + self.modified
