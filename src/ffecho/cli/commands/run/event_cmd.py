"""run event command: CloudEvent against a deployed instance."""

import click

from ffecho.cli.commands.event import event_cmd
from ffecho.cli.commands.shared import event_options
from ffecho.core.dispatch import DispatchTarget


@click.command("event")
@click.argument("host")
@event_options
@click.pass_context
def run_event_cmd(
    click_ctx: click.Context,
    host: str,
    encoding: str,
    event_type: str,
    source: str,
    payload: str | None,
    output_json: bool,
) -> None:
    """Send a CloudEvent to the framework running in Cloud Run at HOST."""
    target = DispatchTarget.remote(host)
    click_ctx.invoke(
        event_cmd,
        https=target.scheme == "https",
        host=target.host,
        port=target.port,
        encoding=encoding,
        event_type=event_type,
        source=source,
        payload=payload,
        output_json=output_json,
    )
