"""Path helpers shared by the planner."""

from __future__ import annotations

import os
import posixpath
from pathlib import PurePath

from podsync.errors import PathResolutionError


def relative_to_workspace(workspace: str, path: str) -> str:
    """
    Return `path` relative to `workspace`, in POSIX form.

    Paths outside the workspace come back with leading ``..`` segments; they
    are still relative and simply fail to match any rule.

    Raises:
        PathResolutionError: if one of the two is absolute and the other is
            not, or the OS cannot relate them (e.g., different drives).
    """
    if os.path.isabs(workspace) != os.path.isabs(path):
        raise PathResolutionError(
            f"changed file {path} can't be found relative to context {workspace}",
            details={"path": path, "workspace": workspace},
        )

    try:
        rel = os.path.relpath(path, workspace)
    except ValueError as exc:
        raise PathResolutionError(
            f"changed file {path} can't be found relative to context {workspace}",
            details={"path": path, "workspace": workspace},
            cause=exc,
        ) from exc

    return PurePath(rel).as_posix()


def join_container_path(*parts: str) -> str:
    """
    Join container path elements and clean the result.

    Unlike posixpath.join, a later element starting with "/" does not reset
    the path; every non-empty element is appended.
    """
    joined = "/".join(p for p in parts if p)
    if not joined:
        return ""

    cleaned = posixpath.normpath(joined)
    # normpath keeps exactly two leading slashes (POSIX allows it).
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned
