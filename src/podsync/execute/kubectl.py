"""Default command generator that syncs through `kubectl exec`."""

from __future__ import annotations

import io
import tarfile
from typing import Optional, Sequence

from podsync.errors import ExecutionError
from podsync.models import Container, Pod
from podsync.plan import SyncMap, SyncPlan

from .operation import Command


class KubectlCommands:
    """
    Generate kubectl commands for one container.

    Deletes run first (`rm -rf`), then copies are streamed as a tar archive
    into `tar x` inside the container, extracted at "/".
    """

    def __init__(
        self,
        *,
        kubectl: str = "kubectl",
        extra_args: Sequence[str] = (),
        timeout: Optional[float] = None,
    ) -> None:
        self._kubectl = kubectl
        self._extra_args = tuple(extra_args)
        self._timeout = timeout

    def __call__(self, pod: Pod, container: Container, plan: SyncPlan) -> list[Command]:
        cmds: list[Command] = []
        if plan.delete:
            cmds.append(self.delete_command(pod, container, plan.delete))
        if plan.copy:
            cmds.append(self.copy_command(pod, container, plan.copy))
        return cmds

    def delete_command(self, pod: Pod, container: Container, files: SyncMap) -> Command:
        dsts = [dst for targets in files.values() for dst in targets]
        argv = self._exec_argv(pod, container, interactive=False)
        return Command(argv=(*argv, "rm", "-rf", "--", *dsts), timeout=self._timeout)

    def copy_command(self, pod: Pod, container: Container, files: SyncMap) -> Command:
        argv = self._exec_argv(pod, container, interactive=True)
        return Command(
            argv=(*argv, "tar", "xmf", "-", "-C", "/", "--no-same-owner"),
            stdin=build_archive(files),
            timeout=self._timeout,
        )

    def _exec_argv(self, pod: Pod, container: Container, *, interactive: bool) -> tuple[str, ...]:
        argv = [
            self._kubectl,
            *self._extra_args,
            "exec",
            pod.name,
            "--namespace",
            pod.namespace,
            "-c",
            container.name,
        ]
        if interactive:
            argv.append("-i")
        argv.append("--")
        return tuple(argv)


def build_archive(files: SyncMap) -> bytes:
    """
    Pack host files into a tar archive at their container destinations.

    A host file with several destinations is stored once per destination.

    Raises:
        ExecutionError: if a host file cannot be read.
    """
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w") as tar:
        for src, dsts in files.items():
            for dst in dsts:
                try:
                    tar.add(src, arcname=dst.lstrip("/"), recursive=False)
                except OSError as exc:
                    raise ExecutionError(
                        f"adding {src} to sync archive: {exc}",
                        details={"path": src, "destination": dst},
                        cause=exc,
                    ) from exc
    return buf.getvalue()
