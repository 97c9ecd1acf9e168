"""Kubernetes API pod lister (optional `kubernetes` dependency)."""

from __future__ import annotations

from typing import Any, Optional

from podsync.errors import (
    ClusterUnavailableError,
    DiscoveryError,
    map_api_error,
)
from podsync.models import Container, Pod


class KubernetesPodLister:
    """
    List pods through the Kubernetes CoreV1 API.

    Notes:
        - Every call lists afresh; nothing is cached between sync cycles.
        - Failures are mapped to DiscoveryError subclasses, never retried.
    """

    def __init__(
        self,
        *,
        kubeconfig: Optional[str] = None,
        context: Optional[str] = None,
        in_cluster: bool = False,
    ) -> None:
        try:
            from kubernetes import client, config
        except Exception as exc:  # pragma: no cover
            raise DiscoveryError(
                "kubernetes client library is not available",
                details={"hint": "Install podsync[kubernetes]"},
                cause=exc,
            ) from exc

        try:
            if in_cluster:
                config.load_incluster_config()
            else:
                config.load_kube_config(config_file=kubeconfig, context=context)
        except Exception as exc:
            raise DiscoveryError(
                "getting k8s client: loading cluster configuration failed",
                details={"kubeconfig": kubeconfig, "context": context, "in_cluster": in_cluster},
                cause=exc,
            ) from exc

        self._api = client.CoreV1Api()

    @classmethod
    def from_api(cls, api: Any) -> "KubernetesPodLister":
        """Create lister from a pre-built CoreV1Api (useful for tests)."""
        obj = cls.__new__(cls)
        obj._api = api
        return obj

    def list_pods(self, namespace: str) -> list[Pod]:
        try:
            pod_list = self._api.list_namespaced_pod(namespace)
        except Exception as exc:
            raise _map_exception(exc, namespace) from exc

        return [_v1_pod_to_pod(item, namespace) for item in (pod_list.items or [])]


def _map_exception(exc: Exception, namespace: str) -> DiscoveryError:
    if isinstance(exc, (OSError, TimeoutError)) or type(exc).__module__.startswith("urllib3"):
        return ClusterUnavailableError(
            f"getting pods for namespace {namespace}: {exc}",
            details={"namespace": namespace},
            cause=exc,
        )

    # kubernetes.client.exceptions.ApiException carries status and reason.
    status = getattr(exc, "status", None)
    if isinstance(status, int):
        reason = getattr(exc, "reason", None)
        return map_api_error(
            status,
            reason=reason if isinstance(reason, str) else None,
            namespace=namespace,
            cause=exc,
        )

    return DiscoveryError(
        f"getting pods for namespace {namespace}: {exc}",
        details={"namespace": namespace},
        cause=exc,
    )


def _v1_pod_to_pod(item: Any, namespace: str) -> Pod:
    metadata = getattr(item, "metadata", None)
    spec = getattr(item, "spec", None)

    name = getattr(metadata, "name", None)
    pod_ns = getattr(metadata, "namespace", None)

    containers = []
    for c in getattr(spec, "containers", None) or []:
        containers.append(Container(name=c.name or "", image=c.image or ""))

    return Pod(
        name=name if isinstance(name, str) else "",
        namespace=pod_ns if isinstance(pod_ns, str) else namespace,
        containers=tuple(containers),
    )
