"""
Cluster inventory, service log dispatch and broadcast orchestration.
"""
from .broadcast import (
    ConfirmationDeclinedError,
    NoClustersMatchedError,
    confirm_dispatch,
    dispatch_to_clusters,
    run_broadcast,
)
from .directory import ClusterDirectory, OcmClusterDirectory
from .notifier import NotificationSender, OsdctlNotificationSender
from .utils import BroadcastError, CommandError

__all__ = [
    'BroadcastError',
    'ClusterDirectory',
    'CommandError',
    'ConfirmationDeclinedError',
    'NoClustersMatchedError',
    'NotificationSender',
    'OcmClusterDirectory',
    'OsdctlNotificationSender',
    'confirm_dispatch',
    'dispatch_to_clusters',
    'run_broadcast',
]
