"""Real Docker operations using subprocess to call Docker CLI.

All operations follow LBYL philosophy: check conditions before acting,
let exceptions bubble to error boundaries.
"""

import logging
import subprocess
from pathlib import Path

from ffecho.core.errors import ExternalProcessError
from ffecho.core.process import COMMAND_NOT_FOUND
from ffecho.ops.docker import Docker

logger = logging.getLogger(__name__)


class RealDocker(Docker):
    """Real Docker operations using Docker CLI via subprocess.

    Exit codes are returned rather than raised so that commands can exit
    with the same code as the failed docker process.
    """

    def is_daemon_running(self) -> bool:
        try:
            result = subprocess.run(
                ["docker", "info"],
                capture_output=True,
                check=False,
                timeout=5,
            )
            return result.returncode == 0
        except (FileNotFoundError, subprocess.TimeoutExpired):
            return False

    def build_image(self, tag: str, build_context: Path) -> int:
        # LBYL: Check build context exists before passing to Docker
        if not build_context.exists():
            raise FileNotFoundError(f"Build context not found: {build_context}")

        return self._run(["docker", "build", "--tag", tag, "."], cwd=build_context)

    def run_container(
        self,
        image_tag: str,
        port: int,
        args: list[str],
        interactive: bool = True,
    ) -> int:
        docker_cmd = ["docker", "run", "--rm"]

        if interactive:
            docker_cmd.append("-it")

        docker_cmd.extend(["-p", f"{port}:{port}"])
        docker_cmd.append(image_tag)
        docker_cmd.extend(args)

        return self._run(docker_cmd, cwd=None)

    def _run(self, docker_cmd: list[str], cwd: Path | None) -> int:
        logger.debug("Running %s", docker_cmd)
        try:
            result = subprocess.run(docker_cmd, cwd=cwd, check=False)
        except FileNotFoundError as e:
            raise ExternalProcessError(
                "Command not found: docker", returncode=COMMAND_NOT_FOUND
            ) from e
        return result.returncode
