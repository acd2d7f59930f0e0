"""Configuration handling for git-tools"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from git_tools.exceptions import InvalidArgumentError
from git_tools.models.branch import BranchTarget, DEFAULT_BRANCH, DEFAULT_REMOTE
from git_tools.models.remote import RemoteSpec


@dataclass
class CheckoutConfig:
    """Arguments for a checkout, validated on construction."""

    # Working copy
    origin: Optional[str] = None  # full git url of origin
    path: Optional[str] = None  # where the working copy lives

    # Target
    branch: str = DEFAULT_BRANCH
    remote: str = DEFAULT_REMOTE
    github: Optional[str] = None  # remote:branch, overrides remote and branch

    # Execution modes
    silent: bool = False
    interactive: bool = False

    # Extra `git -c key=value` settings for every invocation
    git_config: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_path()
        self._validate_origin()
        self._validate_github()
        self._validate_target()
        self._validate_git_config()

    def _validate_path(self):
        if self.path is None or not str(self.path).strip():
            raise InvalidArgumentError("Must specify a path.")
        self.path = str(self.path)

    def _validate_origin(self):
        if self.origin is None or not str(self.origin).strip():
            raise InvalidArgumentError("Must specify an origin.")
        self.origin = str(self.origin).strip()

    def _validate_github(self):
        """Expand the github shorthand into remote and branch."""
        if self.github is None:
            return
        target = BranchTarget.from_github(self.github)
        self.remote = target.remote
        self.branch = target.branch

    def _validate_target(self):
        if not self.branch:
            raise InvalidArgumentError("branch cannot be empty")
        if not self.remote:
            raise InvalidArgumentError("remote cannot be empty")

    def _validate_git_config(self):
        for key in self.git_config:
            if not key or "=" in key:
                raise InvalidArgumentError(f"Invalid git config key '{key}'")

    @property
    def target(self) -> BranchTarget:
        return BranchTarget(remote=self.remote, branch=self.branch)

    @property
    def remote_spec(self) -> RemoteSpec:
        return RemoteSpec(origin_url=self.origin, remote=self.remote)

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "origin": self.origin,
            "path": self.path,
            "branch": self.branch,
            "remote": self.remote,
            "github": self.github,
            "silent": self.silent,
            "interactive": self.interactive,
            "git_config": dict(self.git_config),
        }

    @classmethod
    def from_dict(cls, config_dict: dict) -> "CheckoutConfig":
        """Create CheckoutConfig from dictionary, ignoring unknown keys."""
        known_fields = {
            "origin",
            "path",
            "branch",
            "remote",
            "github",
            "silent",
            "interactive",
            "git_config",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields and v is not None}
        return cls(**filtered)
