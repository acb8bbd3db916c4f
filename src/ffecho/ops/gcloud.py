"""Google Cloud CLI operations interface for Cloud Run deployment."""

from abc import ABC, abstractmethod
from pathlib import Path


class Gcloud(ABC):
    """Abstract interface for gcloud operations.

    Real implementation shells out to the gcloud CLI. Fakes record calls in
    memory for unit tests.
    """

    @abstractmethod
    def get_default_project(self) -> str | None:
        """Return the active gcloud project, or None if none is configured."""
        ...

    @abstractmethod
    def submit_build(self, image: str, build_context: Path) -> int:
        """Build and push image with Cloud Build.

        Args:
            image: Fully qualified image name (gcr.io/PROJECT/APP:TAG)
            build_context: Directory holding the Dockerfile

        Returns:
            Exit code from gcloud builds submit
        """
        ...

    @abstractmethod
    def deploy_service(
        self,
        app_name: str,
        image: str,
        region: str,
        env_vars: dict[str, str],
    ) -> int:
        """Deploy image as a managed, publicly reachable Cloud Run service.

        Args:
            app_name: Cloud Run service name
            image: Fully qualified image name
            region: Cloud Run region
            env_vars: Environment variables to set on the service

        Returns:
            Exit code from gcloud run deploy
        """
        ...
