"""event command: send a CloudEvent to a running instance."""

import click

from ffecho.cli.commands.shared import (
    DEFAULT_HOST,
    default_payload,
    event_options,
    port_option,
)
from ffecho.cli.ensure import error_boundary
from ffecho.cli.json_output import emit_json
from ffecho.cli.json_schemas import EventCommandResponse
from ffecho.cli.output import machine_output
from ffecho.core.cloudevent import EventEncoding
from ffecho.core.context import EchoContext
from ffecho.core.dispatch import DispatchTarget, dispatch_event

_SENDING_MESSAGES = {
    EventEncoding.JSON: "Sending JSON structured event with payload: {payload!r}",
    EventEncoding.BINARY: "Sending binary content event with payload: {payload!r}",
}


@click.command("event")
@click.option("--https", is_flag=True, help="Send request using https.")
@click.option("--host", default=DEFAULT_HOST, show_default=True, help="The host to send to.")
@port_option
@event_options
@click.pass_obj
@error_boundary
def event_cmd(
    ctx: EchoContext,
    https: bool,
    host: str,
    port: int,
    encoding: str,
    event_type: str,
    source: str,
    payload: str | None,
    output_json: bool,
) -> None:
    """Send a CloudEvent to a running framework instance."""
    resolved = EventEncoding.parse(encoding)
    if payload is None:
        payload = default_payload(ctx)
    target = DispatchTarget.local(host, port, https)

    ctx.feedback.info(_SENDING_MESSAGES[resolved].format(payload=payload))
    result = dispatch_event(ctx.http, resolved, event_type, source, payload, target)

    if output_json:
        emit_json(
            EventCommandResponse(
                url=target.url,
                status_code=result.response.status_code,
                body=result.response.body,
                event_id=result.event.id,
                encoding=result.encoding.value,
            ).model_dump(mode="json")
        )
    else:
        machine_output(f"Response: {result.response.body!r}")
