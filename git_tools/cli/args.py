"""Command-line argument parsing for git-tools."""

import argparse
from typing import Dict, List, Optional

from git_tools.__version__ import __version__


def _config_pair(value: str) -> tuple:
    """Parse a key=value git config override."""
    key, sep, setting = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected key=value, got '{value}'")
    return key, setting


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-tools",
        description="Switch a working copy between remotes and branches for review",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show each checkout step")
    parser.add_argument(
        "--debug", action="store_true", help="Show every git command and write a debug log"
    )
    parser.add_argument("--version", action="version", version=f"git-tools {__version__}")

    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    checkout = subparsers.add_parser(
        "checkout",
        help="Clone if needed, then move the working copy to a remote/branch and update it",
    )
    checkout.add_argument("--origin", help="The full git url for the origin of the working copy")
    checkout.add_argument("--path", help="The path to checkout the repository to")
    checkout.add_argument("--branch", default="master", help="The branch to checkout (default: master)")
    checkout.add_argument(
        "--remote",
        default="origin",
        help="The remote to reference, pass to switch to a fork (default: origin)",
    )
    checkout.add_argument(
        "--github",
        metavar="REMOTE:BRANCH",
        help="remote:branch as copied from a GitHub pull request, overrides --remote and --branch",
    )
    checkout.add_argument(
        "--interactive",
        action="store_true",
        help="Prompt before destructive changes are made to the working copy",
    )
    checkout.add_argument(
        "--silent", action="store_true", help="Do not stream git output to the terminal"
    )
    checkout.add_argument(
        "-c",
        "--config",
        dest="git_config",
        metavar="KEY=VALUE",
        type=_config_pair,
        action="append",
        default=[],
        help="Pass a configuration setting to every git command (repeatable)",
    )

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)


def git_config_from_args(pairs: List[tuple]) -> Dict[str, str]:
    return {key: value for key, value in pairs}
