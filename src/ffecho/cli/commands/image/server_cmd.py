"""image server command."""

import click

from ffecho.cli.commands.shared import port_option
from ffecho.cli.ensure import Ensure, error_boundary
from ffecho.core.context import EchoContext


@click.command("server")
@click.argument("target")
@click.option("--image", default=None, help="The Docker image name (defaults to config).")
@port_option
@click.pass_obj
@error_boundary
def image_server_cmd(ctx: EchoContext, target: str, image: str | None, port: int) -> None:
    """Run the locally built Docker image, serving the function TARGET."""
    Ensure.invariant(ctx.docker.is_daemon_running(), "Docker daemon is not running")
    exit_code = ctx.docker.run_container(
        image or ctx.config.image,
        port,
        ["--port", str(port), "--target", target],
    )
    Ensure.process_succeeded(exit_code, "docker run")
