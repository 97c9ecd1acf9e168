"""Public execution exports for podsync."""

from __future__ import annotations

from .kubectl import KubectlCommands, build_archive
from .operation import Command, Operation
from .perform import CommandGenerator, perform

__all__ = [
    "Command",
    "CommandGenerator",
    "KubectlCommands",
    "Operation",
    "build_archive",
    "perform",
]
