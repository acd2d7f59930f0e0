"""Runs state-changing git commands against a working copy"""
import sys
from typing import Dict, List, Optional, Sequence, TextIO, Tuple

import git
from git.cmd import handle_process_output

from git_tools.exceptions import CommandFailedError
from git_tools.logging_config import get_logger

logger = get_logger(__name__)

# Commands that only report progress when asked to, since their stderr is a pipe
PROGRESS_COMMANDS = ("clone", "fetch")


class GitCommandRunner:
    """Invokes git with a discrete argument list, never through a shell.

    Output of mutating commands is streamed line by line to the process
    streams while the command runs, unless the runner is silent. Every
    invocation carries the configured ``-c`` overrides.
    """

    def __init__(self, path: str, silent: bool = False, git_config: Optional[Dict[str, str]] = None,
                 stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        """Initialize the runner.

        Args:
            path: Path of the working copy commands run in
            silent: Capture output instead of streaming it
            git_config: Settings passed as ``git -c key=value``
            stdout: Stream for relayed stdout (defaults to sys.stdout at call time)
            stderr: Stream for relayed stderr (defaults to sys.stderr at call time)
        """
        self.path = str(path)
        self.silent = silent
        self.git_config = dict(git_config or {})
        self._stdout = stdout
        self._stderr = stderr

    def _build_command(self, args: Sequence[str]) -> List[str]:
        args = [str(arg) for arg in args]
        if not self.silent and args and args[0] in PROGRESS_COMMANDS:
            args.insert(1, "--progress")

        command = [git.Git.GIT_PYTHON_GIT_EXECUTABLE or "git"]
        for key, value in self.git_config.items():
            command.extend(["-c", f"{key}={value}"])
        command.extend(args)
        return command

    def _relay(self, line: str, stream: Optional[TextIO], fallback: TextIO):
        if self.silent:
            return
        out = stream or fallback
        out.write(line if line.endswith("\n") else line + "\n")
        out.flush()

    def _execute(self, command: List[str], cwd: Optional[str]) -> Tuple[int, str, str]:
        logger.debug(f"Running {' '.join(command)} (cwd={cwd or '.'})")
        stdout_lines: List[str] = []
        stderr_lines: List[str] = []

        def on_stdout(line: str):
            stdout_lines.append(line)
            self._relay(line, self._stdout, sys.stdout)

        def on_stderr(line: str):
            stderr_lines.append(line)
            self._relay(line, self._stderr, sys.stderr)

        try:
            proc = git.Git(cwd).execute(command, as_process=True)
        except git.exc.GitCommandNotFound as e:
            raise CommandFailedError(command, None, str(e)) from e

        # pumps both pipes on their own threads and returns once they are drained
        handle_process_output(proc, on_stdout, on_stderr)
        try:
            proc.wait()
            status = 0
        except git.exc.GitCommandError as e:
            status = e.status

        logger.debug(f"Exit {status}: {' '.join(command)}")
        return status, "".join(stdout_lines).rstrip("\n"), "".join(stderr_lines).rstrip("\n")

    def _run_in(self, cwd: Optional[str], args: Sequence[str]) -> str:
        command = self._build_command(args)
        status, stdout, stderr = self._execute(command, cwd)
        if status != 0:
            raise CommandFailedError(command, status, stderr)
        return stdout

    def run(self, *args: str) -> str:
        """Run a git command in the working copy, raising CommandFailedError on nonzero exit."""
        return self._run_in(self.path, args)

    def clone(self, origin: str) -> str:
        """Clone origin, with its submodules, into the working copy path."""
        return self._run_in(None, ["clone", "--recurse-submodules", str(origin), self.path])
