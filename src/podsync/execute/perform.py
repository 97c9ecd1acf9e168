"""Apply a SyncPlan to every container running its image."""

from __future__ import annotations

import threading
from typing import Callable, Optional, Sequence

from loguru import logger

from podsync.cluster import PodLister
from podsync.errors import DiscoveryError, NoEffectError, PodSyncError, SyncCancelledError
from podsync.models import Container, Pod
from podsync.plan import SyncPlan

from .operation import Operation

CommandGenerator = Callable[[Pod, Container, SyncPlan], Sequence[Operation]]
"""(pod, container, plan) -> operations to run, in order, for that container."""


def perform(
    image: str,
    plan: SyncPlan,
    namespaces: Sequence[str],
    command_generator: CommandGenerator,
    *,
    pod_lister: PodLister,
    cancel_event: Optional[threading.Event] = None,
) -> int:
    """
    Run the plan's operations in every container whose image is `image`.

    Namespaces, pods, containers and operations are visited sequentially.
    The first failing operation aborts the call; operations that already ran
    are not undone.

    Returns:
        Number of operations executed (0 only for an empty plan).

    Raises:
        DiscoveryError: listing pods failed.
        NoEffectError: no operation ran (no container runs `image`, or every
            generator returned nothing).
        SyncCancelledError: `cancel_event` was set before the sync finished.
        Any error raised by an operation, unchanged.
    """
    if plan.is_empty:
        return 0

    num_synced = 0
    for ns in namespaces:
        _check_cancelled(cancel_event, num_synced)
        for pod in _list_pods(pod_lister, ns):
            for container in pod.containers:
                if container.image != image:
                    continue

                ops = command_generator(pod, container, plan)
                for op in ops:
                    _check_cancelled(cancel_event, num_synced)
                    try:
                        op.run()
                    except Exception:
                        logger.warning(
                            "Sync operation failed in {}/{} ({}): {}",
                            pod.name,
                            container.name,
                            ns,
                            op.describe(),
                        )
                        raise
                    num_synced += 1

                logger.debug(
                    "Ran {} sync operations in {}/{} ({})",
                    len(ops),
                    pod.name,
                    container.name,
                    ns,
                )

    if num_synced == 0:
        raise NoEffectError(
            "didn't sync any files",
            details={"image": image, "namespaces": list(namespaces)},
        )
    return num_synced


def _list_pods(pod_lister: PodLister, namespace: str) -> list[Pod]:
    try:
        return list(pod_lister.list_pods(namespace))
    except PodSyncError:
        raise
    except Exception as exc:
        raise DiscoveryError(
            f"getting pods for namespace {namespace}: {exc}",
            details={"namespace": namespace},
            cause=exc,
        ) from exc


def _check_cancelled(cancel_event: Optional[threading.Event], num_synced: int) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise SyncCancelledError(
            "sync cancelled",
            details={"operations_run": num_synced},
        )
