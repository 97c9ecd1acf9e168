"""Public error exports for podsync."""

from __future__ import annotations

from .exceptions import (
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

__all__ = [
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
