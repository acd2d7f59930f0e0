"""Core checkout procedure for git-tools"""

from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.markup import escape

from git_tools.config import CheckoutConfig
from git_tools.exceptions import NoTrackingBranchError
from git_tools.logging_config import get_logger
from git_tools.models.branch import BranchInfo, RelativeState
from git_tools.services.command_runner import GitCommandRunner
from git_tools.services.gate import InteractiveGate
from git_tools.services.inspector import RepositoryInspector
from git_tools.services.submodule_cache import SubmoduleStateCache

console = Console()
logger = get_logger(__name__)

DIRTY_PROMPT = "Press [enter] to continue and clean your working copy, or ctrl+c to cancel the operation."
AHEAD_PROMPT = "Press [enter] to continue and reset or ctrl+c to cancel the operation."


def dirty_warning(path: str) -> list:
    return [
        f"Repository at {path} has uncommited changes. It is necessary to have a clean working copy "
        f"to proceed. This will revert all pending changes."
    ]


def ahead_warning(path: str) -> list:
    return [
        f"Repository at {path} is currently ahead of the remote fork/branch. To proceed we need to reset "
        f"to the state of the working copy. This will cause you to lose your additional commits.",
        "If you do not want to lose your work, then either push your commits to the remote/branch, "
        "manually pull or rebase.",
    ]


class CheckoutManager:
    """Drives a working copy to a (remote, branch) target.

    Clones the repository if it isn't there yet, then makes sure it is on the
    right remote and branch, clean and up to date. Local changes and local
    commits missing upstream are discarded, after confirmation when running
    interactively.
    """

    def __init__(self, config: Union[CheckoutConfig, dict],
                 gate: Optional[InteractiveGate] = None,
                 runner: Optional[GitCommandRunner] = None):
        """Initialize the manager.

        Args:
            config: CheckoutConfig or a dict of its fields
            gate: Confirmation gate (defaults to one enabled by config.interactive)
            runner: Command runner (defaults to one honoring config.silent)
        """
        if isinstance(config, dict):
            config = CheckoutConfig.from_dict(config)
        self.config = config
        self.path = config.path
        self.target = config.target
        self.remote_spec = config.remote_spec
        self.runner = runner or GitCommandRunner(
            config.path, silent=config.silent, git_config=config.git_config
        )
        self.gate = gate or InteractiveGate(enabled=config.interactive)
        self.inspector = RepositoryInspector(config.path)

    def run(self) -> BranchInfo:
        """Run the checkout and return the branch the working copy ends up on."""
        self._ensure_clone()

        current_branch = self.inspector.current_branch()
        current_tracking = self._current_tracking()
        logger.info(f"{self.path} is on {current_branch} tracking {current_tracking or 'nothing'}")

        self._ensure_remote()
        self._fetch()
        self._clean_working_copy()

        if current_tracking != self.target.tracking_label:
            self._switch_branch(current_branch)

        self._reset_if_ahead()
        self._pull()
        self._restore_submodules()

        result = BranchInfo(
            commit=self.inspector.head_commit(),
            name=self.inspector.current_branch(),
            tracking=self._current_tracking(),
        )
        if not self.config.silent:
            console.print(
                f"[green]On branch {escape(result.name)} tracking {escape(result.tracking or '-')}[/green]"
            )
        return result

    def _current_tracking(self) -> Optional[str]:
        try:
            return self.inspector.tracking_branch()
        except NoTrackingBranchError:
            return None

    def _ensure_clone(self):
        if Path(self.path).exists():
            self.inspector.assert_is_repository()
            return
        logger.info(f"Cloning {self.config.origin} into {self.path}")
        self.runner.clone(self.config.origin)

    def _ensure_remote(self):
        if not self.remote_spec.is_fork:
            return
        remote = self.remote_spec.remote
        if remote in self.inspector.remotes():
            return
        logger.info(f"Adding remote {remote} at {self.remote_spec.fork_url}")
        self.runner.run("remote", "add", remote, self.remote_spec.fork_url)

    def _fetch(self):
        logger.info(f"Fetching {self.target.remote}")
        self.runner.run("fetch", "--recurse-submodules", self.target.remote)

    def _clean_working_copy(self):
        """Revert tracked changes and delete untracked files, submodules first."""
        if not self.inspector.is_dirty():
            return

        self.gate.confirm(dirty_warning(self.path), DIRTY_PROMPT)
        logger.info(f"Cleaning working copy at {self.path}")

        if self.inspector.has_submodules():
            for command in (["reset"], ["clean", "-ffd"], ["checkout", "."]):
                self.runner.run("submodule", "foreach", "--recursive", "git", *command)
            # back to the commits recorded by the parent
            self.runner.run("submodule", "update")

        self.runner.run("reset")
        self.runner.run("clean", "-ffd")
        self.runner.run("checkout", ".")

    def _switch_branch(self, current_branch: str):
        local_branch = self.target.local_branch
        self._ensure_local_branch(local_branch)

        if self.inspector.has_submodules():
            self.runner.run("submodule", "deinit", "--all")
            SubmoduleStateCache(self.inspector.git_dir()).stash(current_branch)

        logger.info(f"Checking out {local_branch}")
        self.runner.run("checkout", local_branch, "--")

    def _ensure_local_branch(self, local_branch: str):
        existing = {branch.name: branch for branch in self.inspector.branches()}
        if local_branch not in existing:
            logger.info(f"Creating {local_branch} tracking {self.target.tracking_label}")
            self.runner.run("branch", "--track", local_branch, self.target.remote_ref)
        elif existing[local_branch].tracking != self.target.tracking_label:
            logger.info(f"Pointing {local_branch} at {self.target.tracking_label}")
            self.runner.run("branch", f"--set-upstream-to={self.target.remote_ref}", local_branch)

    def _reset_if_ahead(self):
        """Drop local commits that are not on the tracking branch."""
        if self.inspector.relative_state() != RelativeState.AHEAD:
            return

        self.gate.confirm(ahead_warning(self.path), AHEAD_PROMPT)
        logger.info(f"Resetting {self.target.local_branch} to {self.target.tracking_label}")
        self.runner.run("reset", "--hard", self.target.remote_ref)
        self.runner.run("clean", "-f")

    def _pull(self):
        self.runner.run("pull")

    def _restore_submodules(self):
        if not self.inspector.has_submodules():
            return

        SubmoduleStateCache(self.inspector.git_dir()).restore(self.target.local_branch)
        self.runner.run("submodule", "sync", "--recursive")
        self.runner.run("submodule", "update", "--init", "--recursive")
