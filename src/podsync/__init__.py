"""podsync public API."""

from __future__ import annotations

from podsync.cluster import KubernetesPodLister, PodLister
from podsync.errors import (
    ClusterAuthError,
    ClusterUnavailableError,
    ConfigurationError,
    DiscoveryError,
    ExecutionError,
    InvalidArgumentError,
    NoEffectError,
    PathResolutionError,
    PatternError,
    PodSyncError,
    SyncCancelledError,
    map_api_error,
)
from podsync.execute import Command, KubectlCommands, Operation, perform
from podsync.manager import PodSyncManager
from podsync.models import (
    Artifact,
    BuildArtifact,
    ChangeEvents,
    Container,
    Pod,
    SyncResult,
    SyncRule,
)
from podsync.plan import (
    OutcomeKind,
    PlanOutcome,
    SyncPlan,
    build_plan,
    intersect,
    latest_tag,
    match_sync_rules,
)

__all__ = [
    # High-level
    "PodSyncManager",
    # Planning
    "build_plan",
    "intersect",
    "latest_tag",
    "match_sync_rules",
    "OutcomeKind",
    "PlanOutcome",
    "SyncPlan",
    # Execution
    "perform",
    "Command",
    "Operation",
    "KubectlCommands",
    "PodLister",
    "KubernetesPodLister",
    # Models
    "Artifact",
    "BuildArtifact",
    "ChangeEvents",
    "Container",
    "Pod",
    "SyncResult",
    "SyncRule",
    # Errors
    "PodSyncError",
    "InvalidArgumentError",
    "ConfigurationError",
    "PathResolutionError",
    "PatternError",
    "DiscoveryError",
    "ClusterAuthError",
    "ClusterUnavailableError",
    "ExecutionError",
    "NoEffectError",
    "SyncCancelledError",
    "map_api_error",
]
