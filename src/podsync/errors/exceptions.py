"""Exception hierarchy and cluster API error mapping for podsync."""

from __future__ import annotations

from typing import Any, Optional


class PodSyncError(Exception):
    """
    Base exception for podsync.

    Attributes:
        details: Optional structured information (e.g., path, image, status).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class InvalidArgumentError(PodSyncError):
    """Raised when user-supplied sync configuration is malformed."""


class ConfigurationError(PodSyncError):
    """Raised when an artifact cannot be synced as configured (e.g., no build tag)."""


class PathResolutionError(PodSyncError):
    """Raised when a changed path cannot be made relative to the workspace."""


class PatternError(PodSyncError):
    """Raised when a sync rule carries a malformed glob pattern."""


class DiscoveryError(PodSyncError):
    """Raised when listing pods in the cluster fails."""


class ClusterAuthError(DiscoveryError):
    """Raised when the cluster rejects credentials (HTTP 401/403)."""


class ClusterUnavailableError(DiscoveryError):
    """Raised when the cluster cannot be reached (network, 5xx)."""


class ExecutionError(PodSyncError):
    """Raised when a generated sync operation fails."""


class NoEffectError(PodSyncError):
    """Raised when a sync finished without executing a single operation."""


class SyncCancelledError(PodSyncError):
    """Raised when a sync is cancelled before all operations ran."""


def map_api_error(
    status_code: Optional[int],
    *,
    reason: Optional[str] = None,
    namespace: Optional[str] = None,
    cause: Optional[BaseException] = None,
) -> DiscoveryError:
    """
    Map a cluster API failure to a podsync discovery error.

    Policy:
        - 401/403 -> ClusterAuthError
        - None/0 (no response) and 5xx -> ClusterUnavailableError
        - otherwise -> DiscoveryError
    """
    details: dict[str, Any] = {"status_code": status_code, "reason": reason}
    if namespace is not None:
        details["namespace"] = namespace

    where = f" for namespace {namespace}" if namespace is not None else ""
    message = f"getting pods{where}"
    if reason:
        message = f"{message}: {reason}"

    if status_code in (401, 403):
        return ClusterAuthError(message, details=details, cause=cause)
    if not status_code or 500 <= status_code <= 599:
        return ClusterUnavailableError(message, details=details, cause=cause)

    return DiscoveryError(message, details=details, cause=cause)
