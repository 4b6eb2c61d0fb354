"""
Static resource catalog for the kubectl simulator.

The catalog is built once and never mutated: apply and delete are
simulated, so every get sees the same snapshot.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Sequence, Tuple

from .records import Deployment, Node, Pod, ResourceRecord, Service

logger = logging.getLogger("kubesandbox.catalog")


@dataclass(frozen=True)
class ResourceKind:
    """
    Description of a resource kind the simulator can list.

    Attributes:
        name: Canonical plural name (e.g. "pods")
        aliases: Every accepted spelling, canonical name included
        header: Table header line as kubectl prints it
        row: str.format template for one row; the record is bound to ``r``
        namespaced: Whether the kind lives inside a namespace
        label: Display label used in the ``get all`` summary
    """

    name: str
    aliases: Tuple[str, ...]
    header: str
    row: str
    namespaced: bool = True
    label: str = ""


PODS = ResourceKind(
    name="pods",
    aliases=("pods", "pod", "po"),
    header="NAME\t\tREADY\tSTATUS\tRESTARTS\tAGE",
    row="{r.name}\t{r.ready}\t{r.status}\t0\t\t{r.age}",
    label="Pods",
)

SERVICES = ResourceKind(
    name="services",
    aliases=("services", "service", "svc"),
    header="NAME\t\tTYPE\t\tCLUSTER-IP\tEXTERNAL-IP\tPORT(S)\t\tAGE",
    row="{r.name}\t{r.type}\t{r.display_cluster_ip}\t{r.display_external_ip}\t\t{r.ports}\t\t{r.age}",
    label="Services",
)

DEPLOYMENTS = ResourceKind(
    name="deployments",
    aliases=("deployments", "deployment", "deploy"),
    header="NAME\t\tREADY\tUP-TO-DATE\tAVAILABLE\tAGE",
    row="{r.name}\t{r.ready}\t{r.up_to_date}\t\t{r.available}\t\t{r.age}",
    label="Deployments",
)

NODES = ResourceKind(
    name="nodes",
    aliases=("nodes", "node", "no"),
    header="NAME\t\tSTATUS\tROLES\t\tAGE\tVERSION",
    row="{r.name}\t{r.status}\t{r.role}\t{r.age}\t{r.version}",
    namespaced=False,
    label="Nodes",
)

DEFAULT_KINDS = (PODS, SERVICES, DEPLOYMENTS, NODES)


class Catalog:
    """Immutable mapping of resource kind to its ordered records."""

    def __init__(
        self,
        kinds: Sequence[ResourceKind],
        records: Mapping[str, Iterable[ResourceRecord]],
    ):
        """
        Build a catalog.

        Args:
            kinds: Kinds in display order
            records: Canonical kind name -> records in display order

        Raises:
            ValueError: If records reference an undeclared kind or two
                kinds claim the same alias
        """
        self._kinds: Dict[str, ResourceKind] = {}
        self._aliases: Dict[str, str] = {}

        for kind in kinds:
            self._kinds[kind.name] = kind
            for alias in (kind.name,) + tuple(kind.aliases):
                owner = self._aliases.setdefault(alias, kind.name)
                if owner != kind.name:
                    raise ValueError(
                        f"Alias '{alias}' claimed by both '{owner}' and '{kind.name}'"
                    )

        unknown = set(records) - set(self._kinds)
        if unknown:
            raise ValueError(f"Records given for undeclared kinds: {', '.join(sorted(unknown))}")

        self._records = MappingProxyType(
            {name: tuple(records.get(name, ())) for name in self._kinds}
        )
        logger.debug(
            "Catalog built: "
            + ", ".join(f"{name}={len(items)}" for name, items in self._records.items())
        )

    @property
    def kinds(self) -> Tuple[ResourceKind, ...]:
        """All kinds in display order."""
        return tuple(self._kinds.values())

    def get_kind(self, name: str) -> Optional[ResourceKind]:
        """Get a kind by canonical name."""
        return self._kinds.get(name)

    def normalize_kind(self, alias: str) -> Optional[str]:
        """
        Resolve an alias to its canonical kind name.

        Returns:
            Canonical name, or None if the alias is not recognized
        """
        return self._aliases.get(alias)

    def lookup(self, kind: str, name: Optional[str] = None) -> Tuple[ResourceRecord, ...]:
        """
        List records of a kind, optionally filtered by exact name.

        An empty result is not an error; callers decide how to report it.

        Raises:
            KeyError: If kind is not a canonical kind of this catalog
        """
        records = self._records[kind]
        if name is None:
            return records
        return tuple(record for record in records if record.name == name)

    def count(self, kind: str) -> int:
        """Number of records of a kind."""
        return len(self._records[kind])


DEFAULT_CATALOG = Catalog(
    DEFAULT_KINDS,
    {
        "pods": [
            Pod(name="web-app", namespace="default", status="Running", age="2d", ready="1/1"),
            Pod(name="api-server", namespace="default", status="Running", age="1d", ready="1/1"),
            Pod(name="database", namespace="default", status="Running", age="3d", ready="1/1"),
        ],
        "services": [
            Service(
                name="web-service",
                namespace="default",
                type="ClusterIP",
                cluster_ip="10.96.0.1",
                ports="80/TCP",
                age="2d",
            ),
            Service(
                name="api-service",
                namespace="default",
                type="LoadBalancer",
                external_ip="<pending>",
                ports="8080/TCP",
                age="1d",
            ),
        ],
        "deployments": [
            Deployment(
                name="web-app",
                namespace="default",
                ready="3/3",
                up_to_date="3",
                available="3",
                age="2d",
            ),
            Deployment(
                name="api-server",
                namespace="default",
                ready="2/2",
                up_to_date="2",
                available="2",
                age="1d",
            ),
        ],
        "nodes": [
            Node(name="node-1", status="Ready", role="control-plane", age="5d", version="v1.28.0"),
            Node(name="node-2", status="Ready", role="<none>", age="5d", version="v1.28.0"),
        ],
    },
)
