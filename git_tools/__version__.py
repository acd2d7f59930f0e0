"""Version information for git-tools."""

__version__ = "1.0.0"
