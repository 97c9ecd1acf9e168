"""Artifact configuration and build records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from podsync.errors import InvalidArgumentError


@dataclass(slots=True, frozen=True)
class SyncRule:
    """
    A user-declared mapping from workspace files to a container path.

    Attributes:
        src: Glob relative to the workspace (``**`` spans directories).
        dest: Absolute container path, or one relative to the container
            working directory.
        strip: Literal prefix removed from the matched path before joining
            it onto ``dest``.
    """

    src: str
    dest: str
    strip: str = ""

    def __post_init__(self) -> None:
        for name in ("src", "dest"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"SyncRule.{name} must be a non-empty string")
        if not isinstance(self.strip, str):
            raise ValueError("SyncRule.strip must be a string")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SyncRule:
        if not isinstance(data, Mapping):
            raise InvalidArgumentError("sync rule must be a mapping")

        unknown = set(data) - {"src", "dest", "strip"}
        if unknown:
            raise InvalidArgumentError(
                "Unknown sync rule keys",
                details={"keys": sorted(unknown)},
            )

        try:
            return cls(
                src=data.get("src"),  # type: ignore[arg-type]
                dest=data.get("dest"),  # type: ignore[arg-type]
                strip=data.get("strip") or "",
            )
        except ValueError as exc:
            raise InvalidArgumentError(str(exc), details=dict(data), cause=exc) from exc


@dataclass(slots=True, frozen=True)
class Artifact:
    """An image built from a workspace, with its live-sync rules."""

    image_name: str
    workspace: str
    sync_rules: tuple[SyncRule, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.image_name, str) or not self.image_name.strip():
            raise ValueError("Artifact.image_name must be a non-empty string")
        if not isinstance(self.workspace, str) or not self.workspace:
            raise ValueError("Artifact.workspace must be a non-empty string")
        object.__setattr__(self, "sync_rules", tuple(self.sync_rules))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Artifact:
        """
        Build an Artifact from its configuration mapping.

        Accepted keys:
            image: image name (required)
            context: workspace directory (default ".")
            sync: {"manual": [{"src": ..., "dest": ..., "strip": ...}, ...]}
        """
        if not isinstance(data, Mapping):
            raise InvalidArgumentError("artifact must be a mapping")

        sync = data.get("sync") or {}
        if not isinstance(sync, Mapping):
            raise InvalidArgumentError("artifact 'sync' must be a mapping")

        manual = sync.get("manual") or []
        if not isinstance(manual, list):
            raise InvalidArgumentError("artifact 'sync.manual' must be a list")

        rules = tuple(SyncRule.from_dict(item) for item in manual)
        try:
            return cls(
                image_name=data.get("image"),  # type: ignore[arg-type]
                workspace=data.get("context") or ".",
                sync_rules=rules,
            )
        except ValueError as exc:
            raise InvalidArgumentError(
                str(exc),
                details={"image": data.get("image")},
                cause=exc,
            ) from exc


@dataclass(slots=True, frozen=True)
class BuildArtifact:
    """The most recently built tag for an image name."""

    image_name: str
    tag: str
