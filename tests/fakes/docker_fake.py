"""Fake Docker operations for testing without Docker daemon.

No actual Docker operations are performed - all calls are recorded
for verification in tests.
"""

from pathlib import Path

from ffecho.ops.docker import Docker


class FakeDocker(Docker):
    """In-memory fake Docker operations for unit testing.

    Records all calls for verification in tests. All operations succeed by
    default - configure failures by setting daemon_running or exit_code.

    Attributes:
        daemon_running: Whether is_daemon_running() returns True (default: True)
        build_calls: List of (tag, build_context) tuples
        run_calls: List of (image_tag, port, args, interactive) tuples
        exit_code: Exit code returned by build_image() and run_container()
    """

    def __init__(self, *, daemon_running: bool = True, exit_code: int = 0) -> None:
        self.daemon_running = daemon_running
        self.exit_code = exit_code
        self.build_calls: list[tuple[str, Path]] = []
        self.run_calls: list[tuple[str, int, list[str], bool]] = []

    def is_daemon_running(self) -> bool:
        return self.daemon_running

    def build_image(self, tag: str, build_context: Path) -> int:
        # LBYL: same validation as real implementation
        if not build_context.exists():
            raise FileNotFoundError(f"Build context not found: {build_context}")

        self.build_calls.append((tag, build_context))
        return self.exit_code

    def run_container(
        self,
        image_tag: str,
        port: int,
        args: list[str],
        interactive: bool = True,
    ) -> int:
        self.run_calls.append((image_tag, port, args, interactive))
        return self.exit_code
