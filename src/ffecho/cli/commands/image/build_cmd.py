"""image build command."""

import click

from ffecho.cli.commands.shared import use_release_option, vendor_framework
from ffecho.cli.ensure import Ensure, error_boundary
from ffecho.core.context import EchoContext


@click.command("build")
@click.option("--image", default=None, help="The Docker image name (defaults to config).")
@use_release_option
@click.pass_obj
@error_boundary
def build_image_cmd(ctx: EchoContext, image: str | None, use_release: bool) -> None:
    """Build the app into a local Docker image."""
    Ensure.invariant(ctx.docker.is_daemon_running(), "Docker daemon is not running")
    vendor_framework(ctx, stage=not use_release)
    image_tag = image or ctx.config.image
    exit_code = ctx.docker.build_image(image_tag, ctx.context_dir)
    Ensure.process_succeeded(exit_code, "docker build")
