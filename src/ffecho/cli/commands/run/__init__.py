"""Commands for deploying to and exercising Cloud Run."""

import click

from ffecho.cli.commands.run.deploy_cmd import deploy_cmd
from ffecho.cli.commands.run.event_cmd import run_event_cmd
from ffecho.cli.commands.run.request_cmd import run_request_cmd


@click.group("run")
def run_group() -> None:
    """Run the framework in Cloud Run."""
    pass


run_group.add_command(deploy_cmd)
run_group.add_command(run_event_cmd)
run_group.add_command(run_request_cmd)
