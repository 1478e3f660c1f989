# tests/unit/test_types.py
"""
Unit tests for display records and their JSON shape.
"""

import json

import pytest

from k8s_mcp_server.k8s.types import (
    DeploymentInfo,
    InvalidResourceError,
    KubernetesClientError,
    KubernetesError,
    NamespaceInfo,
    PodInfo,
    ResourceNotFoundError,
    ServiceInfo,
)


class TestPodInfo:
    def test_empty_optional_fields_omitted(self):
        pod = PodInfo(
            name="web-0", namespace="default", status="Pending",
            ready="0/1", restarts=0, age="30s",
        )
        assert pod.to_dict() == {
            "name": "web-0",
            "namespace": "default",
            "status": "Pending",
            "ready": "0/1",
            "restarts": 0,
            "age": "30s",
        }

    def test_populated_fields_included(self):
        pod = PodInfo(
            name="web-0", namespace="prod", status="Running",
            ready="2/2", restarts=4, age="3d",
            labels={"app": "web"}, node_name="node-1", pod_ip="10.1.2.3",
        )
        data = pod.to_dict()
        assert data["labels"] == {"app": "web"}
        assert data["node_name"] == "node-1"
        assert data["pod_ip"] == "10.1.2.3"

    def test_from_dict_reads_json_output(self):
        pod = PodInfo(
            name="web-0", namespace="prod", status="Running",
            ready="1/1", restarts=1, age="5m", labels={"app": "web"},
        )
        assert PodInfo.from_dict(json.loads(json.dumps(pod.to_dict()))) == pod


class TestServiceInfo:
    def test_key_order_and_omission(self):
        svc = ServiceInfo(
            name="api", namespace="default", type="ClusterIP",
            cluster_ip="10.0.0.10", ports=["80/TCP"], age="2d",
        )
        data = svc.to_dict()
        assert list(data) == ["name", "namespace", "type", "cluster_ip", "ports", "age"]

    def test_external_ips_precede_ports(self):
        svc = ServiceInfo(
            name="lb", namespace="default", type="LoadBalancer",
            cluster_ip="10.0.0.11", ports=["443/TCP:30443"], age="1h",
            external_ips=["1.2.3.4"], selector={"app": "lb"},
        )
        data = svc.to_dict()
        assert list(data)[:6] == [
            "name", "namespace", "type", "cluster_ip", "external_ips", "ports",
        ]
        assert data["selector"] == {"app": "lb"}

    def test_empty_ports_still_serialized(self):
        svc = ServiceInfo(
            name="headless", namespace="default", type="ClusterIP",
            cluster_ip="None", ports=[], age="1d",
        )
        assert svc.to_dict()["ports"] == []

    @pytest.mark.parametrize(
        "svc",
        [
            ServiceInfo(
                name="lb", namespace="prod", type="LoadBalancer",
                cluster_ip="10.0.0.11", ports=["443/TCP:30443", "53/UDP"], age="1h",
                external_ips=["203.0.113.7", "lb.example.com"],
                labels={"app": "lb"}, selector={"app": "lb"},
            ),
            ServiceInfo(
                name="headless", namespace="default", type="ClusterIP",
                cluster_ip="None", ports=[], age="1d",
            ),
        ],
        ids=["load-balancer", "headless"],
    )
    def test_round_trip(self, svc):
        assert ServiceInfo.from_dict(json.loads(json.dumps(svc.to_dict()))) == svc


class TestDeploymentInfo:
    def test_replicas_always_present(self):
        deployment = DeploymentInfo(
            name="web", namespace="default", ready="0/0",
            up_to_date=0, available=0, age="1m", replicas=0,
        )
        data = deployment.to_dict()
        assert data["replicas"] == 0
        assert "labels" not in data

    def test_round_trip(self):
        deployment = DeploymentInfo(
            name="web", namespace="default", ready="2/3",
            up_to_date=3, available=2, age="5m", replicas=3,
            labels={"tier": "frontend"},
        )
        assert DeploymentInfo.from_dict(deployment.to_dict()) == deployment


def test_namespace_info_to_dict():
    ns = NamespaceInfo(name="kube-system", status="Active", age="30d")
    assert ns.to_dict() == {"name": "kube-system", "status": "Active", "age": "30d"}


def test_namespace_info_round_trip():
    ns = NamespaceInfo(
        name="team-a", status="Terminating", age="2h", labels={"owner": "team-a"}
    )
    assert NamespaceInfo.from_dict(json.loads(json.dumps(ns.to_dict()))) == ns


def test_records_are_immutable():
    ns = NamespaceInfo(name="default", status="Active", age="1d")
    with pytest.raises(AttributeError):
        ns.name = "other"


class TestErrors:
    def test_hierarchy(self):
        assert issubclass(ResourceNotFoundError, KubernetesClientError)
        assert issubclass(InvalidResourceError, KubernetesClientError)
        assert issubclass(KubernetesClientError, KubernetesError)

    def test_not_found_carries_status(self):
        err = ResourceNotFoundError("failed to get pod x in namespace default: not found")
        assert err.status == 404
        assert "not found" in str(err)

    def test_client_error_status_optional(self):
        assert KubernetesClientError("boom").status is None
        assert KubernetesClientError("boom", status=403).status == 403
