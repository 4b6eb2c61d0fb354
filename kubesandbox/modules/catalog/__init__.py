"""
Catalog Module - Black Box Interface

Purpose: Read-only snapshot of simulated cluster resources
Interface: Catalog.lookup(), Catalog.count(), Catalog.normalize_kind()
Hidden: Record storage, alias tables

Can be replaced with any other snapshot (tests build their own Catalog).
"""

from .catalog import DEFAULT_CATALOG, DEFAULT_KINDS, Catalog, ResourceKind
from .records import Deployment, Node, Pod, ResourceRecord, Service

__all__ = [
    "Catalog",
    "ResourceKind",
    "DEFAULT_CATALOG",
    "DEFAULT_KINDS",
    "Pod",
    "Service",
    "Deployment",
    "Node",
    "ResourceRecord",
]
