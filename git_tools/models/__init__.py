"""Data models for git-tools."""

from .branch import BranchInfo, BranchTarget, RelativeState
from .remote import RemoteSpec

__all__ = ["BranchInfo", "BranchTarget", "RelativeState", "RemoteSpec"]
