"""Intersect a batch of changed files with sync rules."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from loguru import logger

from podsync.models import SyncRule
from podsync.util.paths import relative_to_workspace

from .rules import match_sync_rules

SyncMap = Mapping[str, tuple[str, ...]]


def intersect(
    workspace: str,
    container_wd: str,
    rules: Sequence[SyncRule],
    files: Sequence[str],
) -> Optional[dict[str, tuple[str, ...]]]:
    """
    Resolve every file in `files` to its container destinations.

    Returns:
        Host path -> destinations, in `files` order. None when any file
        matches no rule: a partial sync is never produced, the whole batch
        must be rebuilt instead.

    Raises:
        PathResolutionError: if a file cannot be made relative to `workspace`.
        PatternError: if a rule pattern is malformed.
    """
    ret: dict[str, tuple[str, ...]] = {}
    for f in files:
        rel_path = relative_to_workspace(workspace, f)

        dsts = match_sync_rules(rules, rel_path, container_wd)
        if not dsts:
            logger.info(
                "Changed file {} does not match any sync pattern. Skipping sync",
                rel_path,
            )
            return None

        ret[f] = tuple(dsts)
    return ret
