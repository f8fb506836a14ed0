"""Service log dispatch through ``osdctl servicelog post``."""
import logging
from abc import ABC, abstractmethod
from typing import List, Sequence

from ..config import Config
from ..models import with_cluster_uuid
from .utils import run_command

logger = logging.getLogger(__name__)


class NotificationSender(ABC):
    """Renders and posts service logs."""

    @abstractmethod
    def preview(self, template: str, params: Sequence[str]) -> None:
        """Render the template without delivering it."""

    @abstractmethod
    def send(self, template: str, params: Sequence[str], external_id: str) -> None:
        """Deliver the template to a single cluster."""


class OsdctlNotificationSender(NotificationSender):
    """Notification sender backed by the ``osdctl`` CLI.

    Output of the underlying command is streamed to the terminal so the
    operator sees the rendered message. Any failure raises ``CommandError``.
    """

    def __init__(self, osdctl_bin: str = None, placeholder_uuid: str = None):
        self.osdctl_bin = osdctl_bin or Config.OSDCTL_BIN
        self.placeholder_uuid = placeholder_uuid or Config.PLACEHOLDER_UUID

    def post_command(self, template: str, params: Sequence[str], cluster_uuid: str, send: bool) -> List[str]:
        args = [self.osdctl_bin, "servicelog", "post"]
        if not send:
            args.append("--dry-run")
        args += ["-t", template]
        for param in with_cluster_uuid(tuple(params), cluster_uuid):
            args += ["-p", param]
        return args

    def post(self, template: str, params: Sequence[str], cluster_uuid: str, send: bool) -> None:
        run_command(self.post_command(template, params, cluster_uuid, send), capture=False)

    def preview(self, template: str, params: Sequence[str]) -> None:
        self.post(template, params, self.placeholder_uuid, send=False)

    def send(self, template: str, params: Sequence[str], external_id: str) -> None:
        logger.debug(f"Posting {template} to {external_id}")
        self.post(template, params, external_id, send=True)
