"""Module-level helpers mirroring the checkout and inspector operations.

Every helper takes the working copy path (without a trailing slash) and opens
a fresh inspector, so nothing is remembered between calls.
"""

import os
from typing import List, Optional

from git_tools.config import CheckoutConfig
from git_tools.core import CheckoutManager
from git_tools.models.branch import BranchInfo, RelativeState
from git_tools.services.gate import InteractiveGate
from git_tools.services.inspector import RepositoryInspector


def checkout(config: Optional[CheckoutConfig] = None, *, gate: Optional[InteractiveGate] = None,
             **kwargs) -> BranchInfo:
    """Clone a repo if it isn't already cloned, then put it on the right remote and branch, up to date.

    Accepts either a CheckoutConfig or its fields as keyword arguments:
    origin, path, branch ("master"), remote ("origin"), github ("remote:branch"),
    silent (False), interactive (False), git_config ({}).
    """
    if config is None:
        config = CheckoutConfig(**kwargs)
    elif kwargs:
        merged = config.to_dict()
        if "remote" in kwargs or "branch" in kwargs:
            # an explicit target replaces the stored shorthand
            merged.pop("github")
        config = CheckoutConfig.from_dict({**merged, **kwargs})
    return CheckoutManager(config, gate=gate).run()


def is_git_repo(path: str) -> bool:
    return RepositoryInspector(path).is_repository()


def assert_is_git(path: str) -> None:
    RepositoryInspector(path).assert_is_repository()


def get_branch(path: str) -> str:
    return RepositoryInspector(path).current_branch()


def get_tracking_branch(path: str) -> str:
    return RepositoryInspector(path).tracking_branch()


def get_branches(path: str) -> List[BranchInfo]:
    return RepositoryInspector(path).branches()


def get_state(path: str) -> RelativeState:
    return RepositoryInspector(path).relative_state()


def is_dirty(path: str) -> bool:
    return RepositoryInspector(path).is_dirty()


def has_submodules(path: str) -> bool:
    return RepositoryInspector(path).has_submodules()


def path_exists(path: str) -> bool:
    return os.path.exists(path)
