"""PodSyncManager: orchestrates plan building and in-container apply."""

from __future__ import annotations

import threading
from typing import Iterable, Optional, Sequence

from podsync.cluster import PodLister
from podsync.errors import InvalidArgumentError
from podsync.execute import CommandGenerator, perform
from podsync.models import Artifact, BuildArtifact, ChangeEvents, SyncResult
from podsync.plan import PlanOutcome, SyncPlan, WorkingDirResolver, build_plan


class PodSyncManager:
    """
    High-level live sync for the dev loop: Plan -> Apply.

    Collaborators are injected; the manager holds no state between cycles.
    Callers must run at most one cycle per artifact at a time.
    """

    def __init__(
        self,
        pod_lister: PodLister,
        resolve_working_dir: WorkingDirResolver,
        command_generator: CommandGenerator,
        *,
        namespaces: Sequence[str],
        insecure_registries: Iterable[str] = (),
    ) -> None:
        if not namespaces:
            raise InvalidArgumentError("namespaces must not be empty")

        self._pod_lister = pod_lister
        self._resolve_working_dir = resolve_working_dir
        self._command_generator = command_generator
        self._namespaces = tuple(namespaces)
        self._insecure_registries = frozenset(insecure_registries)

    @property
    def namespaces(self) -> tuple[str, ...]:
        return self._namespaces

    def build_plan(
        self,
        artifact: Artifact,
        events: ChangeEvents,
        builds: Sequence[BuildArtifact],
    ) -> PlanOutcome:
        """Build the sync plan for one artifact and change batch."""
        return build_plan(
            artifact,
            events,
            builds,
            self._resolve_working_dir,
            insecure_registries=self._insecure_registries,
        )

    def apply_plan(
        self,
        plan: SyncPlan,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> SyncResult:
        """
        Apply a plan to every container running `plan.image`.

        Policy:
            - Errors propagate; nothing is retried or rolled back.
            - The dev loop falls back to a full rebuild on any error.
        """
        operations = perform(
            plan.image,
            plan,
            self._namespaces,
            self._command_generator,
            pod_lister=self._pod_lister,
            cancel_event=cancel_event,
        )
        return SyncResult(
            status="success",
            image=plan.image,
            operations=operations,
            files_copied=len(plan.copy),
            files_deleted=len(plan.delete),
        )

    def sync(
        self,
        artifact: Artifact,
        events: ChangeEvents,
        builds: Sequence[BuildArtifact],
        *,
        execute: bool = True,
        cancel_event: Optional[threading.Event] = None,
    ) -> tuple[PlanOutcome, Optional[SyncResult]]:
        """
        Convenience API.

        - execute=False: build and return (outcome, None)
        - execute=True: also apply the plan when one was built
        """
        outcome = self.build_plan(artifact, events, builds)
        if not execute or outcome.plan is None:
            return outcome, None
        return outcome, self.apply_plan(outcome.plan, cancel_event=cancel_event)
