"""Services used by the checkout procedure."""

from .command_runner import GitCommandRunner
from .inspector import RepositoryInspector
from .gate import InteractiveGate
from .submodule_cache import SubmoduleStateCache

__all__ = [
    "GitCommandRunner",
    "RepositoryInspector",
    "InteractiveGate",
    "SubmoduleStateCache",
]
