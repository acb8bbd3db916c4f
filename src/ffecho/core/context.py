"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from ffecho.core.config import EchoConfig, load_config
from ffecho.core.http.abc import HttpClient
from ffecho.core.http.real import RealHttpClient
from ffecho.core.process import ProcessRunner, RealProcessRunner
from ffecho.core.time.abc import Time
from ffecho.core.time.real import RealTime
from ffecho.core.user_feedback import InteractiveFeedback, SuppressedFeedback, UserFeedback
from ffecho.ops.docker import Docker
from ffecho.ops.docker_real import RealDocker
from ffecho.ops.gcloud import Gcloud
from ffecho.ops.gcloud_real import RealGcloud

CONTEXT_DIR_ENV_VAR = "FFECHO_CONTEXT_DIR"


@dataclass(frozen=True)
class EchoContext:
    """Immutable context holding all dependencies for ffecho commands.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    process: ProcessRunner
    docker: Docker
    gcloud: Gcloud
    http: HttpClient
    time: Time
    feedback: UserFeedback
    config: EchoConfig
    context_dir: Path  # The app directory commands operate in

    @staticmethod
    def for_test(
        process: ProcessRunner | None = None,
        docker: Docker | None = None,
        gcloud: Gcloud | None = None,
        http: HttpClient | None = None,
        time: Time | None = None,
        feedback: UserFeedback | None = None,
        config: EchoConfig | None = None,
        context_dir: Path | None = None,
    ) -> "EchoContext":
        """Create test context with optional pre-configured fakes.

        Any dependency not given is replaced by its in-memory fake.

        Example:
            >>> http = FakeHttpClient(response=HttpResponse(200, "ok"))
            >>> ctx = EchoContext.for_test(http=http, context_dir=tmp_path)
            >>> runner.invoke(cli, ["event"], obj=ctx)
        """
        from tests.fakes.docker_fake import FakeDocker
        from tests.fakes.gcloud import FakeGcloud
        from tests.fakes.http import FakeHttpClient
        from tests.fakes.process import FakeProcessRunner
        from tests.fakes.time import FakeTime
        from tests.fakes.user_feedback import FakeUserFeedback

        if context_dir is None:
            context_dir = Path("/test/framework/examples/echo")

        if config is None:
            config = EchoConfig.defaults(context_dir)

        return EchoContext(
            process=process or FakeProcessRunner(),
            docker=docker or FakeDocker(),
            gcloud=gcloud or FakeGcloud(),
            http=http or FakeHttpClient(),
            time=time or FakeTime(),
            feedback=feedback or FakeUserFeedback(),
            config=config,
            context_dir=context_dir,
        )


def resolve_context_dir(context_dir: Path | None) -> Path:
    """Pick the app directory: explicit flag (or FFECHO_CONTEXT_DIR), then cwd."""
    if context_dir is not None:
        return context_dir.resolve()
    return Path.cwd()


def create_context(*, context_dir: Path | None = None, quiet: bool = False) -> EchoContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Raises:
        ConfigurationError: If ffecho.toml is malformed
    """
    resolved_dir = resolve_context_dir(context_dir)
    config = load_config(resolved_dir)

    feedback: UserFeedback
    if quiet:
        feedback = SuppressedFeedback()
    else:
        feedback = InteractiveFeedback()

    return EchoContext(
        process=RealProcessRunner(),
        docker=RealDocker(),
        gcloud=RealGcloud(),
        http=RealHttpClient(),
        time=RealTime(),
        feedback=feedback,
        config=config,
        context_dir=resolved_dir,
    )
