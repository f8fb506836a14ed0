"""Subprocess helpers and error types shared by the broadcast modules."""
import logging
import shlex
import subprocess
from typing import List, Sequence

logger = logging.getLogger(__name__)

EXIT_COMMAND_FAILED = 1
EXIT_USAGE = 2
EXIT_NO_CLUSTERS = 3
EXIT_DECLINED = 99


class BroadcastError(Exception):
    """Base exception for errors that end a broadcast run."""
    exit_code = EXIT_COMMAND_FAILED


class CommandError(BroadcastError):
    """Exception raised when an external command fails or cannot be started."""

    def __init__(self, args: Sequence[str], returncode: int, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed with exit code {returncode}: {format_command(args)}"
        if stderr:
            message += f"\n{stderr.strip()}"
        super().__init__(message)


def format_command(args: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in args)


def run_command(args: List[str], capture: bool = True) -> subprocess.CompletedProcess:
    """Run an external command and fail loudly on a non-zero exit.

    Args:
        args: Command and arguments
        capture: Capture stdout/stderr instead of streaming them to the terminal

    Returns:
        The completed process

    Raises:
        CommandError: If the command is missing or exits non-zero
    """
    logger.debug(f"Running: {format_command(args)}")
    try:
        result = subprocess.run(args, capture_output=capture, text=True)
    except FileNotFoundError:
        raise CommandError(args, 127, f"{args[0]}: command not found")

    if result.returncode != 0:
        raise CommandError(args, result.returncode, result.stderr if capture else "")
    return result
