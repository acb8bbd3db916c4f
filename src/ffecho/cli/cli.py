import logging
import os
from pathlib import Path

import click

from ffecho.cli.commands.event import event_cmd
from ffecho.cli.commands.image import image_group
from ffecho.cli.commands.request import request_cmd
from ffecho.cli.commands.run import run_group
from ffecho.cli.commands.server import server_cmd
from ffecho.cli.commands.test_cmd import test_cmd
from ffecho.cli.commands.vendor import clean_cmd, vendor_framework_cmd
from ffecho.cli.ensure import Ensure
from ffecho.core.context import CONTEXT_DIR_ENV_VAR, create_context
from ffecho.core.errors import ConfigurationError

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

# Enable debug logging if FFECHO_DEBUG environment variable is set
if os.getenv("FFECHO_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="ffecho")
@click.option(
    "--context-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    envvar=CONTEXT_DIR_ENV_VAR,
    default=None,
    help="The app directory to operate in (defaults to the current directory).",
)
@click.option("--quiet", "-q", is_flag=True, help="Suppress status messages.")
@click.pass_context
def cli(ctx: click.Context, context_dir: Path | None, quiet: bool) -> None:
    """Exercise a functions framework app locally, in Docker, and in Cloud Run."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(context_dir=context_dir, quiet=quiet)
        except ConfigurationError as e:
            Ensure.invariant(False, str(e))


# Register all commands
cli.add_command(clean_cmd)
cli.add_command(event_cmd)
cli.add_command(image_group)
cli.add_command(request_cmd)
cli.add_command(run_group)
cli.add_command(server_cmd)
cli.add_command(test_cmd)
cli.add_command(vendor_framework_cmd)


def main() -> None:
    """CLI entry point used by the `ffecho` console script."""
    cli()
