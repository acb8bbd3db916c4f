"""Docker operations interface for running the echo app in a container.

This module defines the abstract interface for Docker operations, following
the ops pattern with ABC-based dependency injection for testability.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Docker(ABC):
    """Abstract interface for Docker operations.

    Real implementations use subprocess to call the Docker CLI. Fake
    implementations are pure in-memory for unit tests without requiring a
    Docker daemon.
    """

    @abstractmethod
    def build_image(self, tag: str, build_context: Path) -> int:
        """Build a Docker image from the Dockerfile in build_context.

        Args:
            tag: Image tag to use (e.g., "functions-framework-echo-test")
            build_context: Directory holding the Dockerfile (must exist)

        Returns:
            Exit code from docker build

        Raises:
            FileNotFoundError: If build_context doesn't exist
            ExternalProcessError: If the docker binary is not installed
        """
        ...

    @abstractmethod
    def run_container(
        self,
        image_tag: str,
        port: int,
        args: list[str],
        interactive: bool = True,
    ) -> int:
        """Run a container, publishing port on the same host port.

        Args:
            image_tag: Docker image tag to run
            port: Port published as port:port
            args: Arguments passed to the image entry point
            interactive: Whether to attach TTY for interactive sessions

        Returns:
            Exit code from container process

        Raises:
            ExternalProcessError: If the docker binary is not installed
        """
        ...

    @abstractmethod
    def is_daemon_running(self) -> bool:
        """Check if Docker daemon is running and accessible.

        Note:
            This is a LBYL check - call before other operations to provide
            helpful error messages if Docker isn't available.
        """
        ...
