"""Remote model"""
from dataclasses import dataclass

from git_tools.exceptions import InvalidArgumentError
from git_tools.models.branch import DEFAULT_REMOTE


@dataclass(frozen=True)
class RemoteSpec:
    """The origin URL of a working copy plus the remote alias being targeted."""
    origin_url: str
    remote: str = DEFAULT_REMOTE

    @property
    def repository_name(self) -> str:
        """Short name of the upstream repository, e.g. ``project`` for ``.../project.git``."""
        url = self.origin_url.rstrip("/")
        if "/" in url:
            name = url.rsplit("/", 1)[1]
        else:
            # scp-style url without a path, e.g. host:project.git
            name = url.rsplit(":", 1)[-1]
        if name.endswith(".git"):
            name = name[: -len(".git")]
        if not name:
            raise InvalidArgumentError(f"Cannot derive a repository name from origin '{self.origin_url}'")
        return name

    @property
    def is_fork(self) -> bool:
        return self.remote != DEFAULT_REMOTE

    @property
    def fork_url(self) -> str:
        """SSH url of the fork, following GitHub's owner/name layout."""
        return f"git@github.com:{self.remote}/{self.repository_name}.git"
