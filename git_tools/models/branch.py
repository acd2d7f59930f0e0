"""Branch model and related enums"""
import re
from enum import Enum
from dataclasses import dataclass
from typing import Optional

from git_tools.exceptions import InvalidArgumentError

DEFAULT_REMOTE = "origin"
DEFAULT_BRANCH = "master"

# remote:branch as copied from the GitHub pull request page
GITHUB_SHORTHAND = re.compile(r"^(.+?):(.+)$")


class RelativeState(Enum):
    """Position of the local branch relative to its upstream."""
    AHEAD = "ahead"
    BEHIND = "behind"
    EQUAL = "equal"


@dataclass
class BranchInfo:
    """A local branch as reported by for-each-ref."""
    commit: str
    name: str
    tracking: Optional[str] = None  # None = no upstream


@dataclass(frozen=True)
class BranchTarget:
    """A (remote, branch) pair a working copy should be switched to."""
    remote: str = DEFAULT_REMOTE
    branch: str = DEFAULT_BRANCH

    @property
    def local_branch(self) -> str:
        """Local branch name, prefixed with the remote for forks."""
        if self.remote == DEFAULT_REMOTE:
            return self.branch
        return f"{self.remote}-{self.branch}"

    @property
    def tracking_label(self) -> str:
        return f"{self.remote}/{self.branch}"

    @property
    def remote_ref(self) -> str:
        return f"remotes/{self.remote}/{self.branch}"

    @classmethod
    def from_github(cls, shorthand: str) -> "BranchTarget":
        """Parse the remote:branch syntax GitHub shows for a pull request."""
        match = GITHUB_SHORTHAND.match(shorthand or "")
        if match is None:
            raise InvalidArgumentError(
                'Github flag is invalid, must be in the form copied from github like --github="remote:branch"'
            )
        return cls(remote=match.group(1), branch=match.group(2))
