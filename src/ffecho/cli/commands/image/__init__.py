"""Commands for running the app in a local Docker container."""

import click

from ffecho.cli.commands.image.build_cmd import build_image_cmd
from ffecho.cli.commands.image.server_cmd import image_server_cmd


@click.group("image")
def image_group() -> None:
    """Run the framework in a local Docker container."""
    pass


image_group.add_command(build_image_cmd)
image_group.add_command(image_server_cmd)
