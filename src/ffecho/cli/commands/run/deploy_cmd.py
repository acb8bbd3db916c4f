"""run deploy command."""

import logging

import click

from ffecho.cli.commands.shared import (
    default_project,
    default_tag,
    use_release_option,
    vendor_framework,
)
from ffecho.cli.ensure import Ensure, error_boundary
from ffecho.core.context import EchoContext

logger = logging.getLogger(__name__)


def image_name(project: str, app_name: str, tag: str) -> str:
    return f"gcr.io/{project}/{app_name}:{tag}"


@click.command("deploy")
@click.argument("target")
@click.option("--project", default=None, help="The project ID (defaults to the gcloud project).")
@click.option("--app-name", default=None, help="Name of the Cloud Run app (defaults to config).")
@click.option("--tag", default=None, help="Docker tag used as a build ID (defaults to now).")
@use_release_option
@click.pass_obj
@error_boundary
def deploy_cmd(
    ctx: EchoContext,
    target: str,
    project: str | None,
    app_name: str | None,
    tag: str | None,
    use_release: bool,
) -> None:
    """Deploy the app to Cloud Run, serving the function TARGET."""
    app_tag = tag or default_tag(ctx)
    app_project = project or default_project(ctx)
    app = app_name or ctx.config.app_name
    image = image_name(app_project, app, app_tag)
    logger.debug("Deploying %s as %s", image, app)

    vendor_framework(ctx, stage=not use_release)

    exit_code = ctx.gcloud.submit_build(image, ctx.context_dir)
    Ensure.process_succeeded(exit_code, "gcloud builds submit")

    exit_code = ctx.gcloud.deploy_service(
        app,
        image,
        ctx.config.region,
        {"FUNCTION_TARGET": target},
    )
    Ensure.process_succeeded(exit_code, "gcloud run deploy")
