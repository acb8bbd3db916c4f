"""vendor-framework and clean commands."""

import click

from ffecho.cli.commands.shared import vendor_framework
from ffecho.cli.ensure import error_boundary
from ffecho.core.context import EchoContext
from ffecho.core.vendor import clean_vendor


@click.command("vendor-framework")
@click.pass_obj
@error_boundary
def vendor_framework_cmd(ctx: EchoContext) -> None:
    """Copy the current framework source into the vendor directory."""
    vendor_framework(ctx, stage=True)


@click.command("clean")
@click.pass_obj
@error_boundary
def clean_cmd(ctx: EchoContext) -> None:
    """Remove the vendor directory."""
    if clean_vendor(ctx.context_dir, ctx.config.vendor_dir):
        ctx.feedback.success(f"Removed {ctx.config.vendor_dir}/")
    else:
        ctx.feedback.info(f"Nothing to clean: {ctx.config.vendor_dir}/ does not exist")
