"""Result model for an applied sync plan."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

SyncStatus = Literal["success"]


@dataclass(slots=True, frozen=True)
class SyncResult:
    """
    Outcome of a successful apply.

    Failures are raised, never reported through this model.
    """

    status: SyncStatus
    image: str
    operations: int
    files_copied: int
    files_deleted: int
