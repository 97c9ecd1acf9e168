"""Tagged result of plan building."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .sync_plan import SyncPlan


class OutcomeKind(str, Enum):
    """What the dev loop should do after plan building."""

    NO_CHANGE_NEEDED = "NO_CHANGE_NEEDED"
    REBUILD_REQUIRED = "REBUILD_REQUIRED"
    PLAN = "PLAN"


@dataclass(slots=True, frozen=True)
class PlanOutcome:
    """
    Either a ready SyncPlan or the reason no plan exists.

    NO_CHANGE_NEEDED: nothing to sync (no changes, or no sync rules).
    REBUILD_REQUIRED: a changed file cannot be synced; rebuild the image.
    PLAN: `plan` is fully populated.
    """

    kind: OutcomeKind
    plan: Optional[SyncPlan] = None
    reason: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.kind is OutcomeKind.PLAN) != (self.plan is not None):
            raise ValueError("PlanOutcome.plan must be set only for kind=PLAN")

    @classmethod
    def no_change(cls, reason: str) -> PlanOutcome:
        return cls(kind=OutcomeKind.NO_CHANGE_NEEDED, reason=reason)

    @classmethod
    def rebuild(cls, reason: str) -> PlanOutcome:
        return cls(kind=OutcomeKind.REBUILD_REQUIRED, reason=reason)

    @classmethod
    def of(cls, plan: SyncPlan) -> PlanOutcome:
        return cls(kind=OutcomeKind.PLAN, plan=plan)

    @property
    def has_plan(self) -> bool:
        return self.kind is OutcomeKind.PLAN

    @property
    def requires_rebuild(self) -> bool:
        return self.kind is OutcomeKind.REBUILD_REQUIRED
