"""
Local working-tree probes, shelled out to git.

Neither function raises: outside a repository (or without git at all) they
report "nothing there".
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

GIT_TIMEOUT = 10


def _git(args: list[str], cwd: Optional[Union[str, Path]] = None) -> Optional[str]:
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            timeout=GIT_TIMEOUT,
            cwd=cwd,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("git %s failed: %s", " ".join(args), e)
        return None
    if result.returncode != 0:
        return None
    return result.stdout


def has_local_changes(cwd: Optional[Union[str, Path]] = None) -> bool:
    """True when the working tree has uncommitted or untracked changes."""
    if _git(["rev-parse", "--is-inside-work-tree"], cwd) is None:
        return False
    status = _git(["status", "--porcelain"], cwd) or ""
    diff = _git(["diff", "--stat"], cwd) or ""
    return bool(status.strip() or diff.strip())


def last_commit_subject(cwd: Optional[Union[str, Path]] = None) -> str:
    return (_git(["log", "-1", "--pretty=%s"], cwd) or "").strip()


def git_dir(cwd: Optional[Union[str, Path]] = None) -> Optional[Path]:
    out = _git(["rev-parse", "--git-dir"], cwd)
    if out is None:
        return None
    path = Path(out.strip())
    if cwd is not None and not path.is_absolute():
        path = Path(cwd) / path
    return path
