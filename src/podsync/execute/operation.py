"""Executable sync operations."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable

from podsync.errors import ExecutionError


@runtime_checkable
class Operation(Protocol):
    """One step of a container sync. Raises on failure."""

    def run(self) -> None: ...

    def describe(self) -> str: ...


@dataclass(slots=True, frozen=True)
class Command:
    """
    An external command, optionally fed `stdin`.

    Raises ExecutionError from run() on non-zero exit, timeout or OS failure.
    """

    argv: tuple[str, ...]
    stdin: Optional[bytes] = field(default=None, repr=False)
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "argv", tuple(self.argv))
        if not self.argv:
            raise ValueError("Command.argv must not be empty")

    def describe(self) -> str:
        return " ".join(self.argv)

    def run(self) -> None:
        details = {"argv": list(self.argv)}
        try:
            completed = subprocess.run(
                list(self.argv),
                input=self.stdin,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise ExecutionError(
                f"running {self.describe()}: timed out after {self.timeout}s",
                details=details,
                cause=exc,
            ) from exc
        except OSError as exc:
            raise ExecutionError(
                f"running {self.describe()}: {exc}",
                details=details,
                cause=exc,
            ) from exc

        if completed.returncode != 0:
            stderr = completed.stderr.decode("utf-8", errors="replace").strip()
            details.update({"returncode": completed.returncode, "stderr": stderr})
            raise ExecutionError(
                f"running {self.describe()}: exit status {completed.returncode}: {stderr}",
                details=details,
            )
