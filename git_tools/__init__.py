"""
git-tools - Switch a working copy between remotes and branches for review
"""

from .__version__ import __version__
from .api import (
    assert_is_git,
    checkout,
    get_branch,
    get_branches,
    get_state,
    get_tracking_branch,
    has_submodules,
    is_dirty,
    is_git_repo,
    path_exists,
)
from .config import CheckoutConfig
from .core import CheckoutManager
from .exceptions import (
    CommandFailedError,
    GitToolsError,
    InvalidArgumentError,
    NoTrackingBranchError,
    NotARepositoryError,
)
from .models import BranchInfo, BranchTarget, RelativeState, RemoteSpec

__all__ = [
    "__version__",
    "checkout",
    "assert_is_git",
    "get_branch",
    "get_branches",
    "get_state",
    "get_tracking_branch",
    "has_submodules",
    "is_dirty",
    "is_git_repo",
    "path_exists",
    "CheckoutConfig",
    "CheckoutManager",
    "GitToolsError",
    "InvalidArgumentError",
    "NotARepositoryError",
    "NoTrackingBranchError",
    "CommandFailedError",
    "BranchInfo",
    "BranchTarget",
    "RelativeState",
    "RemoteSpec",
]
