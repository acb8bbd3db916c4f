"""Helpers shared by the build, run and deploy commands."""

from collections.abc import Callable, Sequence

import click

from ffecho.cli.ensure import Ensure
from ffecho.core.cloudevent import EventEncoding
from ffecho.core.context import EchoContext
from ffecho.core.vendor import prepare_vendor

DEFAULT_PORT = 8080
DEFAULT_HOST = "localhost"
DEFAULT_EVENT_TYPE = "com.example.test"
DEFAULT_EVENT_SOURCE = "toys"
TAG_FORMAT = "%Y%m%d%H%M%S"

USE_RELEASE_HELP = "Use the released framework package instead of the local source."


def vendor_framework(ctx: EchoContext, *, stage: bool) -> None:
    """Run vendor preparation for the app directory.

    Must complete before any build/run/deploy process is spawned.
    """
    prepare_vendor(
        stage,
        ctx.context_dir,
        ctx.config.vendor_sources,
        ctx.feedback,
        vendor_dir_name=ctx.config.vendor_dir,
    )


def default_project(ctx: EchoContext) -> str:
    """Active gcloud project, exiting with an error if none is configured."""
    return Ensure.not_none(
        ctx.gcloud.get_default_project(),
        "No --project given and no default gcloud project is configured",
    )


def default_tag(ctx: EchoContext) -> str:
    """Timestamp build tag of the form YYYYMMDDHHMMSS."""
    return ctx.time.now().strftime(TAG_FORMAT)


def default_payload(ctx: EchoContext) -> str:
    return f"Payload created {ctx.time.now().strftime('%Y-%m-%d %H:%M:%S %z')}"


def run_checked(ctx: EchoContext, command: Sequence[str]) -> None:
    """Run command in the app directory, exiting with its code on failure."""
    exit_code = ctx.process.run(command, cwd=ctx.context_dir)
    Ensure.process_succeeded(exit_code, " ".join(command))


def use_release_option[F: Callable](func: F) -> F:
    return click.option("--use-release", is_flag=True, help=USE_RELEASE_HELP)(func)


def port_option[F: Callable](func: F) -> F:
    return click.option(
        "--port",
        type=click.IntRange(1, 65535),
        default=DEFAULT_PORT,
        show_default=True,
        help="The port to use.",
    )(func)


def event_options[F: Callable](func: F) -> F:
    """CloudEvents flags shared by `event` and `run event`."""
    options = [
        click.option(
            "--encoding",
            type=click.Choice([member.value for member in EventEncoding]),
            default=EventEncoding.JSON.value,
            show_default=True,
            help="The CloudEvents encoding.",
        ),
        click.option(
            "--type",
            "event_type",
            default=DEFAULT_EVENT_TYPE,
            show_default=True,
            help="The CloudEvents event type.",
        ),
        click.option(
            "--source",
            default=DEFAULT_EVENT_SOURCE,
            show_default=True,
            help="The CloudEvents event source URI.",
        ),
        click.option(
            "--payload",
            default=None,
            help="The CloudEvents event data (defaults to a timestamped message).",
        ),
        click.option("--json", "output_json", is_flag=True, help="Output JSON format."),
    ]
    for option in reversed(options):
        func = option(func)
    return func
