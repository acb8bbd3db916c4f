"""request command: send a bare HTTP request to a running instance."""

import click

from ffecho.cli.commands.shared import DEFAULT_HOST, port_option
from ffecho.cli.ensure import error_boundary
from ffecho.cli.json_output import emit_json
from ffecho.cli.json_schemas import RequestCommandResponse
from ffecho.cli.output import machine_output
from ffecho.core.context import EchoContext
from ffecho.core.dispatch import DispatchTarget, send_request


@click.command("request")
@click.option("--https", is_flag=True, help="Send request using https.")
@click.option("--host", default=DEFAULT_HOST, show_default=True, help="The host to send to.")
@port_option
@click.option("--json", "output_json", is_flag=True, help="Output JSON format.")
@click.pass_obj
@error_boundary
def request_cmd(ctx: EchoContext, https: bool, host: str, port: int, output_json: bool) -> None:
    """Send an HTTP request to a running framework instance."""
    target = DispatchTarget.local(host, port, https)
    ctx.feedback.info("Sending HTTP request")
    response = send_request(ctx.http, target)

    if output_json:
        emit_json(
            RequestCommandResponse(
                url=target.url,
                status_code=response.status_code,
                body=response.body,
            ).model_dump(mode="json")
        )
    else:
        machine_output(f"Response: {response.body!r}")
