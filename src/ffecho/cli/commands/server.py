"""server command: serve a function from the app with the framework."""

import click

from ffecho.cli.commands.shared import (
    port_option,
    run_checked,
    use_release_option,
    vendor_framework,
)
from ffecho.cli.ensure import error_boundary
from ffecho.core.context import EchoContext


@click.command("server")
@click.argument("target")
@port_option
@use_release_option
@click.pass_obj
@error_boundary
def server_cmd(ctx: EchoContext, target: str, port: int, use_release: bool) -> None:
    """Run the framework locally, serving the function TARGET."""
    vendor_framework(ctx, stage=not use_release)
    config = ctx.config
    run_checked(ctx, config.install_command)
    run_checked(
        ctx,
        [
            *config.exec_prefix,
            config.server_binary(use_release),
            "--target",
            target,
            "--port",
            str(port),
            "--detailed-errors",
        ],
    )
