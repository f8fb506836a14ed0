import importlib
import logging
from typing import List, Optional

import typer
from typer.core import TyperCommand

from slbroadcast.config import Config
from slbroadcast.logging import setup_logger
from slbroadcast.models import RESERVED_PARAM, BroadcastConfig, param_key
from slbroadcast.modules import (
    BroadcastError,
    ClusterDirectory,
    NotificationSender,
    OcmClusterDirectory,
    OsdctlNotificationSender,
    run_broadcast,
)
from slbroadcast.modules.utils import EXIT_COMMAND_FAILED, EXIT_USAGE

logger = logging.getLogger("slbroadcast")


def usage_error_class(name: str) -> type:
    """Look up a usage error class in the click typer is built on (bundled or not)."""
    for cls in typer.BadParameter.__mro__:
        module = importlib.import_module(cls.__module__)
        if isinstance(getattr(module, name, None), type):
            return getattr(module, name)
    raise ImportError(f"typer does not provide {name}")


NoSuchOption = usage_error_class("NoSuchOption")

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


class BroadcastCommand(TyperCommand):
    """Exit 1 on unknown flags; other usage errors keep click's exit code 2."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except NoSuchOption as e:
            e.exit_code = EXIT_COMMAND_FAILED
            raise


def get_cluster_directory() -> ClusterDirectory:
    return OcmClusterDirectory()


def get_notification_sender() -> NotificationSender:
    return OsdctlNotificationSender()


def template_params(values: Optional[List[str]]) -> List[str]:
    """Check KEY=VALUE form and drop the reserved CLUSTER_UUID key."""
    params = []
    for raw in values or []:
        if param_key(raw) == RESERVED_PARAM:
            typer.echo(f"⚠️  {RESERVED_PARAM} is filled in per cluster, ignoring '-p {raw}'")
            continue
        if "=" not in raw or not param_key(raw):
            raise typer.BadParameter(f"expected KEY=VALUE, got {raw!r}")
        params.append(raw)
    return params


@app.command(cls=BroadcastCommand)
def main(
    filters: Optional[List[str]] = typer.Option(
        None, "--filter", "--filters", "-f",
        help="Cluster search expression, may be repeated (all must match)"
    ),
    template: str = typer.Option(..., "--template", "-t", help="Service log template path or URL"),
    params: Optional[List[str]] = typer.Option(
        None, "--param", "-p", callback=template_params,
        help="Template parameter as KEY=VALUE, may be repeated"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Preview and list targets without sending"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """Send a service log to every cluster matching the filters."""
    setup_logger("slbroadcast", logging.DEBUG if debug else None)
    if debug:
        logger.debug("Debug mode enabled")

    try:
        Config.validate()
    except ValueError as e:
        logger.error(f"❌ {e}")
        raise typer.Exit(code=EXIT_USAGE)

    config = BroadcastConfig(
        template=template,
        filters=tuple(filters or ()),
        params=tuple(params or ()),
        dry_run=dry_run,
    )

    try:
        summary = run_broadcast(config, get_cluster_directory(), get_notification_sender())
    except BroadcastError as e:
        logger.error(f"❌ {e}")
        raise typer.Exit(code=e.exit_code)

    if dry_run:
        typer.echo(f"🧪 Dry run complete, {summary.matched - len(summary.skipped)} clusters would receive the service log.")
    else:
        typer.echo(f"✅ Service log sent to {len(summary.sent)} clusters.")
    if summary.skipped:
        typer.echo(f"⚠️  Skipped {len(summary.skipped)} clusters without an external id: {', '.join(summary.skipped)}")


if __name__ == "__main__":
    app()
