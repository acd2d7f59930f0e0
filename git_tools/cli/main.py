"""Entry point for the git-tools command."""

import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from git_tools.cli.args import git_config_from_args, parse_args
from git_tools.config import CheckoutConfig
from git_tools.core import CheckoutManager
from git_tools.logging_config import get_logger, setup_logging

console = Console()
error_console = Console(stderr=True)
logger = get_logger(__name__)


def run_checkout(parsed_args) -> int:
    config = CheckoutConfig(
        origin=parsed_args.origin,
        path=parsed_args.path,
        branch=parsed_args.branch,
        remote=parsed_args.remote,
        github=parsed_args.github,
        silent=parsed_args.silent,
        interactive=parsed_args.interactive,
        git_config=git_config_from_args(parsed_args.git_config),
    )

    if parsed_args.debug:
        error_console.print("[yellow]Configuration:[/yellow]")
        for key, value in config.to_dict().items():
            error_console.print(f"  {key}: {escape(str(value))}")

    CheckoutManager(config).run()
    return 0


COMMANDS = {
    "checkout": run_checkout,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    try:
        return COMMANDS[parsed_args.command](parsed_args)
    except (KeyboardInterrupt, EOFError):
        error_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        error_console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        if parsed_args.debug:
            error_console.print_exception()
        logger.debug("Command failed", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
