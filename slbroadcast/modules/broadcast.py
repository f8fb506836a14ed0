"""Broadcast orchestration.

Lists the matching clusters, previews the service log, asks the operator to
confirm, then posts the service log to each cluster one at a time.
"""
import logging
from typing import Callable, List, Sequence

import typer

from ..models import BroadcastConfig, BroadcastSummary, ClusterRecord
from .directory import ClusterDirectory
from .notifier import NotificationSender
from .utils import EXIT_DECLINED, EXIT_NO_CLUSTERS, BroadcastError

logger = logging.getLogger(__name__)

YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")


class NoClustersMatchedError(BroadcastError):
    """Raised when the inventory returns no clusters for the filters."""
    exit_code = EXIT_NO_CLUSTERS

    def __init__(self, filters: Sequence[str]):
        self.filters = list(filters)
        shown = " AND ".join(f"[{f}]" for f in self.filters) or "(no filters)"
        super().__init__(f"No clusters matched filters: {shown}")


class ConfirmationDeclinedError(BroadcastError):
    """Raised when the operator does not confirm the broadcast."""
    exit_code = EXIT_DECLINED


def _prompt(text: str) -> str:
    return typer.prompt(text, default="", show_default=False)


def confirm_dispatch(count: int, prompt: Callable[[str], str] = _prompt) -> None:
    """Ask once for a yes/no answer.

    Raises:
        ConfirmationDeclinedError: On "n"/"no", or on anything that is not a
            recognised answer. There is no second prompt.
    """
    noun = "cluster" if count == 1 else "clusters"
    try:
        answer = prompt(f"Send this service log to {count} {noun}? [y/n]")
    except typer.Abort:
        raise ConfirmationDeclinedError("No answer given, aborting.")

    answer = (answer or "").strip().lower()
    if answer in YES_ANSWERS:
        return
    if answer in NO_ANSWERS:
        raise ConfirmationDeclinedError("Aborted by operator.")
    typer.echo("Please answer one of: y, yes, n, no")
    raise ConfirmationDeclinedError(f"Unrecognised answer {answer!r}, aborting.")


def show_clusters(clusters: List[ClusterRecord]) -> None:
    typer.echo(f"Matched {len(clusters)} clusters:")
    for cluster in clusters:
        typer.echo(f"  {cluster.id}  {cluster.name}")


def dispatch_to_clusters(
    config: BroadcastConfig,
    clusters: List[ClusterRecord],
    directory: ClusterDirectory,
    sender: NotificationSender,
) -> BroadcastSummary:
    """Post the service log to every cluster that has an external id.

    Clusters are handled in order. A cluster without an external id is
    skipped with a warning. A failed post raises and stops the loop, so
    clusters after it are never contacted.
    """
    summary = BroadcastSummary(matched=len(clusters))
    for cluster in clusters:
        external_id = directory.resolve_external_id(cluster.id)
        if not external_id:
            logger.warning(f"⚠️  Cluster {cluster} has no external id, skipping.")
            summary.record_skipped(cluster)
            continue

        if config.dry_run:
            typer.echo(f"🧪 Would send to {cluster} → {external_id}")
            continue

        typer.echo(f"📨 Sending service log to {cluster} → {external_id}")
        sender.send(config.template, config.params, external_id)
        summary.record_sent(cluster)
        typer.echo(f"✅ Sent to {cluster}")
    return summary


def run_broadcast(
    config: BroadcastConfig,
    directory: ClusterDirectory,
    sender: NotificationSender,
    prompt: Callable[[str], str] = _prompt,
) -> BroadcastSummary:
    """Run a full broadcast: list, preview, confirm, send.

    Raises:
        NoClustersMatchedError: If no cluster matches the filters
        ConfirmationDeclinedError: If the operator does not confirm
        CommandError: If listing, preview or a send fails
    """
    clusters = directory.list_clusters(config.filters)
    if not clusters:
        raise NoClustersMatchedError(config.filters)
    show_clusters(clusters)

    typer.echo("🔍 Rendering service log preview...")
    sender.preview(config.template, config.params)

    if not config.dry_run:
        confirm_dispatch(len(clusters), prompt)

    summary = dispatch_to_clusters(config, clusters, directory, sender)
    logger.info(
        f"Broadcast finished: {len(summary.sent)} sent, "
        f"{len(summary.skipped)} skipped of {summary.matched} matched"
    )
    return summary
