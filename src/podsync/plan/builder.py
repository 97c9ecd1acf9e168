"""Build a SyncPlan for one artifact from a change batch."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence

from loguru import logger

from podsync.errors import ConfigurationError, PodSyncError
from podsync.models import Artifact, BuildArtifact, ChangeEvents

from .intersect import intersect
from .outcome import PlanOutcome
from .sync_plan import SyncPlan

WorkingDirResolver = Callable[[str, frozenset[str]], str]
"""(image tag, insecure registries) -> working directory inside the image."""


def latest_tag(image_name: str, builds: Iterable[BuildArtifact]) -> str:
    """Return the tag of the first build of `image_name`, or "" if none."""
    for build in builds:
        if build.image_name == image_name:
            return build.tag
    return ""


def build_plan(
    artifact: Artifact,
    events: ChangeEvents,
    builds: Sequence[BuildArtifact],
    resolve_working_dir: WorkingDirResolver,
    *,
    insecure_registries: Optional[Iterable[str]] = None,
) -> PlanOutcome:
    """
    Build the sync plan for `artifact`.

    Steps:
        1. No changes or no sync rules -> NO_CHANGE_NEEDED (no lookups).
        2. Resolve the latest tag of the artifact image.
        3. Resolve the container working directory for that tag.
        4. Intersect added+modified files (copy) and deleted files (delete).
           Any unmatched file -> REBUILD_REQUIRED.

    Raises:
        ConfigurationError: no build tag, or working dir lookup failed.
        PathResolutionError: a changed file is not relative to the workspace.
        PatternError: a sync rule pattern is malformed.
    """
    if not events.has_changed():
        return PlanOutcome.no_change("no files changed")
    if not artifact.sync_rules:
        return PlanOutcome.no_change(f"no sync rules declared for {artifact.image_name}")

    tag = latest_tag(artifact.image_name, builds)
    if not tag:
        raise ConfigurationError(
            f"could not find latest tag for image {artifact.image_name} in builds: "
            f"{[(b.image_name, b.tag) for b in builds]}",
            details={"image": artifact.image_name},
        )

    registries = frozenset(insecure_registries or ())
    try:
        container_wd = resolve_working_dir(tag, registries)
    except Exception as exc:
        raise ConfigurationError(
            f"retrieving working dir for {tag}: {exc}",
            details={"tag": tag},
            cause=exc,
        ) from exc

    to_copy = _intersect_phase(
        "added, modified",
        artifact,
        container_wd,
        events.changed(),
    )
    to_delete = _intersect_phase(
        "deleted",
        artifact,
        container_wd,
        events.deleted,
    )

    if to_copy is None or to_delete is None:
        return PlanOutcome.rebuild("changed files do not all match a sync rule")

    plan = SyncPlan(image=tag, copy=to_copy, delete=to_delete)
    logger.debug(
        "Sync plan for {}: {} to copy, {} to delete",
        tag,
        len(plan.copy),
        len(plan.delete),
    )
    return PlanOutcome.of(plan)


def _intersect_phase(
    phase: str,
    artifact: Artifact,
    container_wd: str,
    files: Sequence[str],
) -> Optional[dict[str, tuple[str, ...]]]:
    try:
        return intersect(artifact.workspace, container_wd, artifact.sync_rules, files)
    except PodSyncError as exc:
        # Keep the error class; prefix where in the plan it happened.
        raise type(exc)(
            f"intersecting sync map and {phase} files: {exc}",
            details=dict(exc.details),
            cause=exc,
        ) from exc
