"""
Cluster inventory access.

The inventory is queried through the ``ocm`` CLI. Listings come back as
whitespace separated columns; they are turned into ``ClusterRecord`` values
here so nothing else has to split text.
"""
import json
import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..config import Config
from ..models import ClusterRecord
from .utils import CommandError, run_command

logger = logging.getLogger(__name__)

ABSENT_EXTERNAL_IDS = ("", "null")


class ClusterDirectory(ABC):
    """Source of clusters and their external identifiers."""

    @abstractmethod
    def list_clusters(self, filters: Sequence[str]) -> List[ClusterRecord]:
        """Return the clusters matching every filter."""

    @abstractmethod
    def resolve_external_id(self, cluster_id: str) -> Optional[str]:
        """Return the cluster's external id, or None when it has none."""


def parse_cluster_listing(output: str) -> List[ClusterRecord]:
    """Parse ``ocm list clusters`` output into cluster records.

    Args:
        output: Raw listing, one cluster per line, ID first and NAME second

    Returns:
        List of cluster records in listing order
    """
    records = []
    for line in output.splitlines():
        parts = line.split()
        if not parts:
            continue
        # ocm prints a header unless --no-headers is honoured
        if parts[0] == "ID" and parts[1:2] == ["NAME"]:
            continue
        name = parts[1] if len(parts) > 1 else ""
        records.append(ClusterRecord(id=parts[0], name=name))
    return records


def read_external_id(output: str) -> Optional[str]:
    """Extract ``external_id`` from an ``ocm get cluster`` JSON document.

    Raises:
        ValueError: If the output is not a JSON object
    """
    data = json.loads(output)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    external_id = data.get("external_id")
    if external_id is None or str(external_id).strip() in ABSENT_EXTERNAL_IDS:
        return None
    return str(external_id).strip()


class OcmClusterDirectory(ClusterDirectory):
    """Cluster directory backed by the ``ocm`` CLI."""

    def __init__(self, ocm_bin: str = None):
        self.ocm_bin = ocm_bin or Config.OCM_BIN

    def list_command(self, filters: Sequence[str]) -> List[str]:
        args = [self.ocm_bin, "list", "clusters", "--no-headers"]
        for expr in filters:
            args += ["--parameter", f"search={expr}"]
        return args

    def list_clusters(self, filters: Sequence[str]) -> List[ClusterRecord]:
        result = run_command(self.list_command(filters))
        clusters = parse_cluster_listing(result.stdout)
        logger.debug(f"Inventory returned {len(clusters)} clusters")
        return clusters

    def resolve_external_id(self, cluster_id: str) -> Optional[str]:
        try:
            result = run_command([self.ocm_bin, "get", "cluster", cluster_id])
        except CommandError as e:
            logger.warning(f"⚠️  Lookup of cluster {cluster_id} failed: {e}")
            return None

        try:
            return read_external_id(result.stdout)
        except ValueError as e:
            logger.warning(f"⚠️  Could not read external_id for cluster {cluster_id}: {e}")
            return None
