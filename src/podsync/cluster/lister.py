"""Pod discovery contract."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from podsync.models import Pod


@runtime_checkable
class PodLister(Protocol):
    """Lists the pods of a namespace. Fails with a DiscoveryError."""

    def list_pods(self, namespace: str) -> Sequence[Pod]: ...
