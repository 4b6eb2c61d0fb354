"""
Unit tests for the Catalog Module.

Tests cover:
- Alias normalization
- Name-filtered lookup
- Immutability of the built-in snapshot
- Validation of alternate catalogs
"""

import dataclasses
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from kubesandbox.modules.catalog import (
    DEFAULT_CATALOG,
    DEFAULT_KINDS,
    Catalog,
    Node,
    Pod,
    ResourceKind,
    Service,
)


class TestNormalizeKind:
    """Tests for alias normalization."""

    @pytest.mark.parametrize(
        "alias,expected",
        [
            ("pods", "pods"),
            ("pod", "pods"),
            ("po", "pods"),
            ("services", "services"),
            ("service", "services"),
            ("svc", "services"),
            ("deployments", "deployments"),
            ("deployment", "deployments"),
            ("deploy", "deployments"),
            ("nodes", "nodes"),
            ("node", "nodes"),
            ("no", "nodes"),
        ],
    )
    def test_known_aliases(self, catalog, alias, expected):
        assert catalog.normalize_kind(alias) == expected

    @pytest.mark.parametrize("alias", ["all", "secrets", "POD", "", "p"])
    def test_unrecognized_aliases(self, catalog, alias):
        assert catalog.normalize_kind(alias) is None


class TestLookup:
    """Tests for record lookup."""

    def test_pods_in_display_order(self, catalog):
        names = [pod.name for pod in catalog.lookup("pods")]

        assert names == ["web-app", "api-server", "database"]

    def test_name_filter(self, catalog):
        result = catalog.lookup("deployments", "api-server")

        assert len(result) == 1
        assert result[0].ready == "2/2"

    def test_name_filter_miss_is_empty(self, catalog):
        assert catalog.lookup("pods", "ghost") == ()

    def test_name_filter_is_exact(self, catalog):
        assert catalog.lookup("pods", "web") == ()

    def test_unknown_kind_raises(self, catalog):
        with pytest.raises(KeyError):
            catalog.lookup("secrets")

    def test_counts(self, catalog):
        assert catalog.count("pods") == 3
        assert catalog.count("services") == 2
        assert catalog.count("deployments") == 2
        assert catalog.count("nodes") == 2

    def test_kinds_in_display_order(self, catalog):
        assert [kind.name for kind in catalog.kinds] == [
            "pods",
            "services",
            "deployments",
            "nodes",
        ]

    def test_nodes_are_cluster_scoped(self, catalog):
        assert catalog.get_kind("nodes").namespaced is False
        assert catalog.get_kind("pods").namespaced is True
        assert catalog.get_kind("all") is None


class TestImmutability:
    """The snapshot never changes."""

    def test_lookup_returns_tuple(self):
        assert isinstance(DEFAULT_CATALOG.lookup("pods"), tuple)

    def test_records_are_frozen(self):
        pod = DEFAULT_CATALOG.lookup("pods")[0]

        with pytest.raises(dataclasses.FrozenInstanceError):
            pod.status = "CrashLoopBackOff"

    def test_source_mapping_changes_do_not_leak(self):
        source = {"pods": [Pod(name="a", namespace="default", status="Running", age="1d", ready="1/1")]}
        catalog = Catalog([DEFAULT_KINDS[0]], source)

        source["pods"].append(
            Pod(name="b", namespace="default", status="Running", age="1d", ready="1/1")
        )

        assert [pod.name for pod in catalog.lookup("pods")] == ["a"]


class TestServiceDisplay:
    """Tests for service IP fallbacks."""

    def test_external_ip_falls_back_to_cluster_ip(self):
        service = Service(
            name="s", namespace="default", type="ClusterIP", ports="80/TCP", age="1d",
            cluster_ip="10.0.0.1",
        )

        assert service.display_external_ip == "10.0.0.1"

    def test_external_ip_falls_back_to_none(self):
        service = Service(name="s", namespace="default", type="ClusterIP", ports="80/TCP", age="1d")

        assert service.display_external_ip == "<none>"
        assert service.display_cluster_ip == "<none>"

    def test_external_ip_preferred(self):
        service = DEFAULT_CATALOG.lookup("services", "api-service")[0]

        assert service.display_external_ip == "<pending>"


class TestCatalogValidation:
    """Tests for building alternate catalogs."""

    def test_records_for_undeclared_kind(self):
        with pytest.raises(ValueError, match="undeclared"):
            Catalog([DEFAULT_KINDS[0]], {"nodes": []})

    def test_conflicting_alias(self):
        clash = ResourceKind(name="points", aliases=("po",), header="NAME", row="{r.name}")

        with pytest.raises(ValueError, match="'po'"):
            Catalog([DEFAULT_KINDS[0], clash], {})

    def test_missing_records_default_to_empty(self):
        catalog = Catalog(DEFAULT_KINDS, {})

        assert catalog.lookup("nodes") == ()

    def test_new_kind_is_data_only(self):
        racks = ResourceKind(
            name="racks", aliases=("racks", "rack"), header="NAME\tSTATUS", row="{r.name}\t{r.status}"
        )
        catalog = Catalog(
            [racks],
            {"racks": [Node(name="r1", status="Ready", role="<none>", age="1d", version="v1")]},
        )

        assert catalog.normalize_kind("rack") == "racks"
        assert catalog.lookup("racks", "r1")[0].status == "Ready"
