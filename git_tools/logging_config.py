"""Logging configuration for git-tools"""
import copy
import logging
import sys
from pathlib import Path

PACKAGE_PREFIX = 'git_tools.'


class ColoredFormatter(logging.Formatter):
    """Colors the level name when the handler writes to a terminal."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def __init__(self, fmt=None, datefmt=None, stream=None):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.stream = stream or sys.stderr

    def format(self, record):
        color = self.COLORS.get(record.levelname)
        if color and self.stream.isatty():
            # other handlers share the record, so color a copy
            record = copy.copy(record)
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: If True, show INFO level messages (one per checkout step)
        debug: If True, show DEBUG level messages (every git invocation) and
            also write them to ~/.git-tools/git-tools.log
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if debug:
        log_dir = Path.home() / '.git-tools'
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / 'git-tools.log'
        file_handler = logging.FileHandler(log_file, mode='w')  # Overwrite each run
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    if debug:
        formatter = ColoredFormatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
            stream=console_handler.stream,
        )
    else:
        formatter = ColoredFormatter(fmt='[%(name)s] %(message)s', stream=console_handler.stream)

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module, named without the package prefix (``core``, ``services.gate``)."""
    if name.startswith(PACKAGE_PREFIX):
        name = name[len(PACKAGE_PREFIX):]
    return logging.getLogger(name)
