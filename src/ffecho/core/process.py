"""Spawning external processes (bundle, test runners, framework servers).

Commands treat a non-zero exit code as fatal and exit with the same code;
see ffecho.cli.ensure.Ensure.process_succeeded.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from ffecho.core.errors import ExternalProcessError

logger = logging.getLogger(__name__)

# Exit code shells use for "command not found"
COMMAND_NOT_FOUND = 127


class ProcessRunner(ABC):
    """Abstract interface for running external commands."""

    @abstractmethod
    def run(self, command: Sequence[str], cwd: Path) -> int:
        """Run command attached to the terminal and wait for it.

        Args:
            command: Command and arguments
            cwd: Working directory

        Returns:
            Exit code of the process

        Raises:
            ExternalProcessError: If the executable cannot be found
        """
        ...


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
) -> subprocess.CompletedProcess[str]:
    """Execute subprocess capturing output, with enriched error reporting.

    Wraps subprocess.run() to re-raise CalledProcessError and missing
    executables as ExternalProcessError with operation context, exit code
    and stderr output.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        cwd: Working directory for command execution

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        ExternalProcessError: If command fails or its binary is not found
    """
    cmd_str = " ".join(str(arg) for arg in cmd)
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
        )
    except subprocess.CalledProcessError as e:
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {cmd_str}"
        error_msg += f"\nExit code: {e.returncode}"
        if e.stderr and e.stderr.strip():
            error_msg += f"\nstderr: {e.stderr.strip()}"
        raise ExternalProcessError(error_msg, returncode=e.returncode) from e
    except FileNotFoundError as e:
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {cmd_str}"
        raise ExternalProcessError(error_msg, returncode=COMMAND_NOT_FOUND) from e


class RealProcessRunner(ProcessRunner):
    """Production implementation using subprocess."""

    def run(self, command: Sequence[str], cwd: Path) -> int:
        logger.debug("Running %s in %s", list(command), cwd)
        try:
            result = subprocess.run(list(command), cwd=cwd, check=False)
        except FileNotFoundError as e:
            raise ExternalProcessError(
                f"Command not found: {command[0]}", returncode=COMMAND_NOT_FOUND
            ) from e
        return result.returncode
