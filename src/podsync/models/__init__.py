"""Public model exports for podsync."""

from __future__ import annotations

from .artifact import Artifact, BuildArtifact, SyncRule
from .cluster import Container, Pod
from .events import ChangeEvents
from .results import SyncResult, SyncStatus

__all__ = [
    "Artifact",
    "BuildArtifact",
    "SyncRule",
    "ChangeEvents",
    "Container",
    "Pod",
    "SyncResult",
    "SyncStatus",
]
