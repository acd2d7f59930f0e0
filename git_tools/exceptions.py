"""Custom exceptions for git-tools"""

from typing import Optional, Sequence, Union


class GitToolsError(Exception):
    """Base exception for all git-tools errors."""
    pass


class InvalidArgumentError(GitToolsError, ValueError):
    """Exception raised for missing or malformed input."""
    pass


class NotARepositoryError(GitToolsError):
    """Exception raised when a path is not a git repository."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Repository at {path} is not a git repo.")


class NoTrackingBranchError(GitToolsError):
    """Exception raised when the current branch has no upstream configured."""

    def __init__(self, path: str, branch: Optional[str] = None):
        self.path = path
        self.branch = branch

        error_msg = f"Repository at {path} has no tracking branch"
        if branch:
            error_msg += f" for branch '{branch}'"

        super().__init__(error_msg)


class CommandFailedError(GitToolsError):
    """Exception raised when a git invocation exits nonzero."""

    def __init__(self, command: Union[str, Sequence[str]], exit_code: Optional[int],
                 stderr: Optional[str] = None):
        if not isinstance(command, str):
            command = " ".join(str(part) for part in command)
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr

        error_msg = f"Process failed returned exit {exit_code}. Command {command}."
        if stderr:
            error_msg += f" {stderr.strip()}"

        super().__init__(error_msg)
