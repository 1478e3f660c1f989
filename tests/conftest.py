"""
Pytest configuration and shared fixtures.

Cluster objects are built from the real ``kubernetes.client`` models and
served by mocked CoreV1Api/AppsV1Api instances, so no cluster is needed.
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from kubernetes import client as k8s

# Add app directory to path
APP_DIR = Path(__file__).parent.parent / "app"
sys.path.insert(0, str(APP_DIR))

from k8s_mcp_server.config import load_config  # noqa: E402
from k8s_mcp_server.k8s import KubernetesClient  # noqa: E402


def ago(**kwargs) -> datetime:
    """A UTC timestamp the given timedelta in the past."""
    return datetime.now(timezone.utc) - timedelta(**kwargs)


def make_pod(
    name: str = "test-pod",
    namespace: str = "default",
    phase: str = "Running",
    ready: tuple[bool, ...] = (True,),
    restarts: tuple[int, ...] = (0,),
    created: datetime | None = None,
    labels: dict | None = None,
    node_name: str | None = "test-node",
    pod_ip: str | None = "10.0.0.1",
) -> k8s.V1Pod:
    statuses = [
        k8s.V1ContainerStatus(
            name=f"c{i}",
            image="nginx",
            image_id="",
            ready=is_ready,
            restart_count=restart_count,
        )
        for i, (is_ready, restart_count) in enumerate(zip(ready, restarts))
    ]
    return k8s.V1Pod(
        metadata=k8s.V1ObjectMeta(
            name=name,
            namespace=namespace,
            labels=labels,
            creation_timestamp=created or ago(hours=1),
        ),
        spec=k8s.V1PodSpec(containers=[], node_name=node_name),
        status=k8s.V1PodStatus(
            phase=phase,
            pod_ip=pod_ip,
            container_statuses=statuses or None,
        ),
    )


def make_service(
    name: str = "test-service",
    namespace: str = "default",
    type_: str = "ClusterIP",
    cluster_ip: str = "10.0.0.100",
    ports: list | None = None,
    ingress: list | None = None,
    labels: dict | None = None,
    selector: dict | None = None,
    created: datetime | None = None,
) -> k8s.V1Service:
    if ports is None:
        ports = [k8s.V1ServicePort(port=80, protocol="TCP")]
    status = None
    if ingress is not None:
        status = k8s.V1ServiceStatus(
            load_balancer=k8s.V1LoadBalancerStatus(ingress=ingress)
        )
    return k8s.V1Service(
        metadata=k8s.V1ObjectMeta(
            name=name,
            namespace=namespace,
            labels=labels,
            creation_timestamp=created or ago(days=2),
        ),
        spec=k8s.V1ServiceSpec(
            type=type_,
            cluster_ip=cluster_ip,
            ports=ports,
            selector=selector,
        ),
        status=status,
    )


def make_deployment(
    name: str = "test-deployment",
    namespace: str = "default",
    replicas: int | None = 3,
    ready_replicas: int | None = 2,
    updated_replicas: int | None = 3,
    available_replicas: int | None = 2,
    labels: dict | None = None,
    created: datetime | None = None,
) -> k8s.V1Deployment:
    # V1DeploymentSpec requires selector/template; build a bare spec instead
    spec = MagicMock()
    spec.replicas = replicas
    return k8s.V1Deployment(
        metadata=k8s.V1ObjectMeta(
            name=name,
            namespace=namespace,
            labels=labels,
            creation_timestamp=created or ago(minutes=5),
        ),
        spec=spec,
        status=k8s.V1DeploymentStatus(
            replicas=replicas,
            ready_replicas=ready_replicas,
            updated_replicas=updated_replicas,
            available_replicas=available_replicas,
        ),
    )


def make_namespace(
    name: str = "default",
    phase: str = "Active",
    labels: dict | None = None,
    created: datetime | None = None,
) -> k8s.V1Namespace:
    return k8s.V1Namespace(
        metadata=k8s.V1ObjectMeta(
            name=name,
            labels=labels,
            creation_timestamp=created or ago(days=30),
        ),
        status=k8s.V1NamespaceStatus(phase=phase),
    )


def item_list(*items) -> MagicMock:
    """Stand-in for a V1*List response."""
    result = MagicMock()
    result.items = list(items)
    return result


@pytest.fixture
def core_v1() -> MagicMock:
    """Mocked CoreV1Api with empty listings."""
    api = MagicMock()
    api.list_namespaced_pod.return_value = item_list()
    api.list_namespaced_service.return_value = item_list()
    api.list_namespace.return_value = item_list()
    api.read_namespaced_pod_log.return_value = ""
    return api


@pytest.fixture
def apps_v1() -> MagicMock:
    """Mocked AppsV1Api with empty listings."""
    api = MagicMock()
    api.list_namespaced_deployment.return_value = item_list()
    return api


@pytest.fixture
def kube_client(core_v1, apps_v1) -> KubernetesClient:
    """Adapter over the mocked APIs."""
    return KubernetesClient(core_v1=core_v1, apps_v1=apps_v1)


@pytest.fixture
def server_config(tmp_path):
    """Configuration built from defaults only (no user file, empty env)."""
    return load_config(tmp_path, environ={})
