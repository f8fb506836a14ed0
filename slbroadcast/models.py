"""
Data models for service log broadcasts.
"""
from dataclasses import dataclass, field
from typing import List, Tuple

RESERVED_PARAM = "CLUSTER_UUID"


@dataclass(frozen=True)
class ClusterRecord:
    """A cluster row from the inventory listing."""
    id: str
    name: str = ""

    def __str__(self) -> str:
        return f"{self.name} ({self.id})" if self.name else self.id


@dataclass(frozen=True)
class BroadcastConfig:
    """Everything a broadcast run needs, fixed once the flags are parsed."""
    template: str
    filters: Tuple[str, ...] = ()
    params: Tuple[str, ...] = ()
    dry_run: bool = False

    def __post_init__(self):
        if RESERVED_PARAM in {param_key(p) for p in self.params}:
            raise ValueError(f"{RESERVED_PARAM} is set per cluster and cannot be passed as a parameter")


@dataclass
class BroadcastSummary:
    """Outcome of a broadcast run."""
    matched: int = 0
    sent: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    def record_sent(self, cluster: ClusterRecord) -> None:
        self.sent.append(str(cluster))

    def record_skipped(self, cluster: ClusterRecord) -> None:
        self.skipped.append(str(cluster))


def param_key(param: str) -> str:
    """Return the key of a KEY=VALUE template parameter."""
    return param.split("=", 1)[0].strip()


def with_cluster_uuid(params: Tuple[str, ...], cluster_uuid: str) -> List[str]:
    """Append the per-cluster CLUSTER_UUID parameter to the operator's parameters."""
    return [*params, f"{RESERVED_PARAM}={cluster_uuid}"]
