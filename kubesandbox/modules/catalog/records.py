"""
Simulated resource records.

All fields are plain strings exactly as kubectl would print them.
"""

from dataclasses import dataclass
from typing import Optional, Union

NONE_MARKER = "<none>"


@dataclass(frozen=True)
class Pod:
    """A pod row."""

    name: str
    namespace: str
    status: str
    age: str
    ready: str


@dataclass(frozen=True)
class Service:
    """A service row. Either IP may be absent."""

    name: str
    namespace: str
    type: str
    ports: str
    age: str
    cluster_ip: Optional[str] = None
    external_ip: Optional[str] = None

    @property
    def display_cluster_ip(self) -> str:
        return self.cluster_ip or NONE_MARKER

    @property
    def display_external_ip(self) -> str:
        """External IP, falling back to the cluster IP, then to <none>."""
        return self.external_ip or self.cluster_ip or NONE_MARKER


@dataclass(frozen=True)
class Deployment:
    """A deployment row."""

    name: str
    namespace: str
    ready: str
    up_to_date: str
    available: str
    age: str


@dataclass(frozen=True)
class Node:
    """A node row. Nodes are cluster scoped and carry no namespace."""

    name: str
    status: str
    role: str
    age: str
    version: str


ResourceRecord = Union[Pod, Service, Deployment, Node]
