"""Public plan exports for podsync."""

from __future__ import annotations

from .builder import WorkingDirResolver, build_plan, latest_tag
from .intersect import SyncMap, intersect
from .outcome import OutcomeKind, PlanOutcome
from .rules import match_sync_rules, strip_prefix
from .sync_plan import SyncPlan

__all__ = [
    "SyncMap",
    "SyncPlan",
    "OutcomeKind",
    "PlanOutcome",
    "WorkingDirResolver",
    "build_plan",
    "intersect",
    "latest_tag",
    "match_sync_rules",
    "strip_prefix",
]
