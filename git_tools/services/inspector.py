"""Read-only queries against a working copy"""
import os
from contextlib import contextmanager
from pathlib import Path
from typing import List

import git

from git_tools.exceptions import CommandFailedError, NoTrackingBranchError, NotARepositoryError
from git_tools.logging_config import get_logger
from git_tools.models.branch import BranchInfo, RelativeState

logger = get_logger(__name__)

BRANCH_FORMAT = "--format=%(objectname)%09%(refname:short)%09%(upstream:short)"


class RepositoryInspector:
    """Read-only view of a working copy.

    Nothing is cached: every query asks git again, so results always reflect
    the state on disk.
    """

    def __init__(self, path: str):
        self.path = str(path)

    def _get_repo(self) -> git.Repo:
        """Get a fresh git.Repo instance for the working copy."""
        self.assert_is_repository()
        return git.Repo(self.path)

    @contextmanager
    def _git_errors(self):
        """Translate GitPython command errors into CommandFailedError."""
        try:
            yield
        except git.exc.GitCommandError as e:
            raise CommandFailedError(e.command, e.status, e.stderr) from e

    def is_repository(self) -> bool:
        """Check if the path contains git metadata."""
        return os.path.exists(os.path.join(self.path, ".git"))

    def assert_is_repository(self):
        """Raise NotARepositoryError if the path isn't a git repository."""
        if not self.is_repository():
            raise NotARepositoryError(self.path)

    def git_dir(self) -> Path:
        """Absolute path of the metadata directory, following .git files."""
        return Path(self._get_repo().git_dir).resolve()

    def current_branch(self) -> str:
        """Return the name of the checked out branch (``HEAD`` when detached)."""
        repo = self._get_repo()
        with self._git_errors():
            return repo.git.rev_parse("--abbrev-ref", "HEAD").strip()

    def head_commit(self) -> str:
        repo = self._get_repo()
        with self._git_errors():
            return repo.git.rev_parse("HEAD").strip()

    def tracking_branch(self) -> str:
        """Return the tracking branch in the format remote/branch-name."""
        repo = self._get_repo()
        try:
            return repo.git.rev_parse("--abbrev-ref", "--symbolic-full-name", "@{u}").strip()
        except git.exc.GitCommandError as e:
            logger.debug(f"No upstream for {self.path}: {e}")
            raise NoTrackingBranchError(self.path) from e

    def branches(self) -> List[BranchInfo]:
        """Return commit, name and tracking of every local branch in ref order."""
        repo = self._get_repo()
        with self._git_errors():
            output = repo.git.for_each_ref(BRANCH_FORMAT, "refs/heads")

        branches = []
        for line in output.splitlines():
            if not line.strip():
                continue
            commit, name, tracking = (line.split("\t") + ["", ""])[:3]
            branches.append(BranchInfo(commit=commit, name=name, tracking=tracking or None))
        return branches

    def remotes(self) -> List[str]:
        """Names of the registered remotes."""
        repo = self._get_repo()
        with self._git_errors():
            output = repo.git.remote()
        return [line.strip() for line in output.splitlines() if line.strip()]

    def relative_state(self) -> RelativeState:
        """Return whether the working copy is ahead, behind or equal to its upstream.

        A branch that has diverged (both sides have unique commits) is reported
        as ahead.
        """
        # raises NoTrackingBranchError before any comparison
        self.tracking_branch()

        repo = self._get_repo()
        with self._git_errors():
            local_commit = repo.git.rev_parse("@").strip()
            remote_commit = repo.git.rev_parse("@{u}").strip()
            base_commit = repo.git.merge_base("@", "@{u}").strip()

        if local_commit == remote_commit:
            return RelativeState.EQUAL
        elif base_commit != local_commit:
            return RelativeState.AHEAD
        else:
            return RelativeState.BEHIND

    def is_dirty(self) -> bool:
        """Check for staged, unstaged or untracked changes."""
        repo = self._get_repo()
        with self._git_errors():
            status = repo.git.status("--porcelain")
        return status != ""

    def has_submodules(self) -> bool:
        return os.path.exists(os.path.join(self.path, ".gitmodules"))
