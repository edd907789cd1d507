"""
git
===

Git execution helpers.

This module is responsible for invoking ``git diff --name-only`` between a
base and a working branch. The rest of the codebase treats Git as a pure
function:

- input: repository root + two branch names
- output: list of changed paths (relative to the root)

A failing diff is the one unrecoverable error of a run, so it is raised as
:class:`GitDiffError` instead of being encoded in the return value.

"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import List, Union


class GitDiffError(RuntimeError):
    """Raised when ``git diff`` cannot list the changed files."""


def ensure_git() -> None:
    """Ensure the `git` executable exists on PATH.

    Raises
    ------
    SystemExit
        If `git` is not found.
    """
    if shutil.which("git") is None:
        raise SystemExit("ERROR: `git` not found in PATH. Install Git and ensure `git diff` works.")


def diff_command(root: Union[str, Path], working: str, base: str) -> List[str]:
    """Return the argument list for a three-dot name-only diff."""
    return ["git", "-C", str(root), "diff", "--name-only", f"{base}...{working}"]


def parse_name_only(output: str) -> List[str]:
    """Parse ``--name-only`` output into a list of paths, skipping blank lines."""
    out: List[str] = []
    for line in output.splitlines():
        if not line.strip():
            continue
        out.append(line)
    return out


def changed_files(root: Union[str, Path], working: str, base: str) -> List[str]:
    """List the files that differ between *base* and *working*.

    The diff uses merge-base semantics (``base...working``), so only the
    changes made on the working branch since it forked are reported.

    Parameters
    ----------
    root:
        Path to the repository (passed to ``git -C``).
    working:
        The branch under review.
    base:
        The branch it will be merged into.

    Returns
    -------
    list[str]
        Paths relative to *root*, in the order Git prints them.

    Raises
    ------
    GitDiffError
        If Git cannot be started or exits with a non-zero status (not a
        repository, unknown branch, ...).
    """
    cmd = diff_command(root, working, base)
    try:
        proc = subprocess.run(cmd, check=False, capture_output=True, text=True)
    except OSError as e:
        raise GitDiffError(f"failed to run git: {e}") from e

    if proc.returncode != 0:
        stderr = (proc.stderr or "").strip()
        raise GitDiffError(f"git diff exited with status {proc.returncode}: {stderr}")

    return parse_name_only(proc.stdout or "")
