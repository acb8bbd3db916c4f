"""Real gcloud operations using subprocess."""

import logging
import subprocess
from pathlib import Path

from ffecho.core.errors import ExternalProcessError
from ffecho.core.process import COMMAND_NOT_FOUND, run_subprocess_with_context
from ffecho.ops.gcloud import Gcloud

logger = logging.getLogger(__name__)


class RealGcloud(Gcloud):
    """Production implementation calling the gcloud CLI."""

    def get_default_project(self) -> str | None:
        result = run_subprocess_with_context(
            ["gcloud", "config", "get-value", "project"],
            "read the default gcloud project",
        )
        project = result.stdout.strip()
        return project or None

    def submit_build(self, image: str, build_context: Path) -> int:
        return self._run(["gcloud", "builds", "submit", "--tag", image, "."], cwd=build_context)

    def deploy_service(
        self,
        app_name: str,
        image: str,
        region: str,
        env_vars: dict[str, str],
    ) -> int:
        cmd = [
            "gcloud",
            "run",
            "deploy",
            app_name,
            "--image",
            image,
            "--platform",
            "managed",
            "--allow-unauthenticated",
            "--region",
            region,
        ]
        if env_vars:
            pairs = ",".join(f"{key}={value}" for key, value in env_vars.items())
            cmd.append(f"--update-env-vars={pairs}")
        return self._run(cmd, cwd=None)

    def _run(self, cmd: list[str], cwd: Path | None) -> int:
        logger.debug("Running %s", cmd)
        try:
            result = subprocess.run(cmd, cwd=cwd, check=False)
        except FileNotFoundError as e:
            raise ExternalProcessError(
                "Command not found: gcloud", returncode=COMMAND_NOT_FOUND
            ) from e
        return result.returncode
