"""Match a workspace-relative path against sync rules."""

from __future__ import annotations

import posixpath
import re
from typing import Optional, Sequence

from wcmatch import glob

from podsync.errors import PatternError
from podsync.models import SyncRule
from podsync.util.paths import join_container_path

# `*` never crosses "/", `**` spans directories, dotfiles are not special.
GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.DOTGLOB | glob.FORCEUNIX


def match_sync_rules(
    rules: Sequence[SyncRule],
    rel_path: str,
    container_wd: str,
) -> list[str]:
    """
    Return the container destinations of `rel_path`, one per matching rule.

    Destinations follow rule declaration order and are not deduplicated.

    Raises:
        PatternError: if a rule's `src` is not a valid glob.
    """
    dsts: list[str] = []
    for rule in rules:
        if not _matches(rule.src, rel_path):
            continue

        # Relative destinations hang off the container working directory.
        wd = "" if posixpath.isabs(rule.dest) else container_wd
        dsts.append(join_container_path(wd, rule.dest, strip_prefix(rel_path, rule.strip)))
    return dsts


def strip_prefix(rel_path: str, prefix: str) -> str:
    """Remove a literal prefix; paths without it are returned unchanged."""
    if prefix and rel_path.startswith(prefix):
        return rel_path[len(prefix):]
    return rel_path


def _matches(pattern: str, rel_path: str) -> bool:
    problem = _pattern_problem(pattern)
    if problem is not None:
        raise PatternError(
            f"pattern error for {rel_path}: {problem}",
            details={"path": rel_path, "pattern": pattern},
        )

    try:
        return glob.globmatch(rel_path, pattern, flags=GLOB_FLAGS)
    except (ValueError, re.error) as exc:
        raise PatternError(
            f"pattern error for {rel_path}",
            details={"path": rel_path, "pattern": pattern},
            cause=exc,
        ) from exc


def _pattern_problem(pattern: str) -> Optional[str]:
    """Describe why `pattern` is malformed, or return None."""
    braces = 0
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "\\":
            if i + 1 >= n:
                return "dangling escape"
            i += 2
            continue

        if ch == "[":
            j = i + 1
            if j < n and pattern[j] in "!^":
                j += 1
            # A leading "]" is a literal member of the class.
            if j < n and pattern[j] == "]":
                j += 1
            while j < n and pattern[j] != "]":
                j += 2 if pattern[j] == "\\" else 1
            if j >= n:
                return "unterminated character class"
            i = j + 1
            continue

        if ch == "{":
            braces += 1
        elif ch == "}" and braces:
            braces -= 1
        i += 1

    if braces:
        return "unterminated brace expression"
    return None
