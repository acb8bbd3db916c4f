"""run request command: request against a deployed instance."""

import click

from ffecho.cli.commands.request import request_cmd
from ffecho.core.dispatch import DispatchTarget


@click.command("request")
@click.argument("host")
@click.option("--json", "output_json", is_flag=True, help="Output JSON format.")
@click.pass_context
def run_request_cmd(click_ctx: click.Context, host: str, output_json: bool) -> None:
    """Send an HTTP request to the framework running in Cloud Run at HOST."""
    target = DispatchTarget.remote(host)
    click_ctx.invoke(
        request_cmd,
        https=target.scheme == "https",
        host=target.host,
        port=target.port,
        output_json=output_json,
    )
