"""Per-branch storage of submodule state"""
import shutil
from pathlib import Path

from git_tools.logging_config import get_logger

logger = get_logger(__name__)

CACHE_DIR = Path("git-tools") / "modules"


class SubmoduleStateCache:
    """Moves ``<git_dir>/modules`` in and out of a branch-keyed cache.

    Switching branches deinitializes the submodules, which would otherwise
    throw away their clones along with any branch switched inside them.
    Stashing the directory under the branch name keeps that state until the
    branch is checked out again.
    """

    def __init__(self, git_dir: Path):
        self.git_dir = Path(git_dir)
        self.modules_dir = self.git_dir / "modules"
        self.cache_root = self.git_dir / CACHE_DIR

    def entry_for(self, branch: str) -> Path:
        return self.cache_root / branch

    def has_entry(self, branch: str) -> bool:
        return self.entry_for(branch).is_dir()

    def stash(self, branch: str) -> bool:
        """Move the live modules directory under ``branch``. Returns False if there was nothing to move."""
        if not self.modules_dir.is_dir():
            logger.debug(f"No modules directory to stash for {branch}")
            return False

        target = self.entry_for(branch)
        if target.exists():
            shutil.rmtree(target)
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.move(str(self.modules_dir), str(target))
        logger.info(f"Stashed submodule state for {branch}")
        return True

    def restore(self, branch: str) -> bool:
        """Replace the live modules directory with the one stashed for ``branch``."""
        if not self.has_entry(branch):
            return False

        if self.modules_dir.exists():
            shutil.rmtree(self.modules_dir)
        shutil.move(str(self.entry_for(branch)), str(self.modules_dir))
        logger.info(f"Restored submodule state for {branch}")
        return True
