"""
Kubernetes client adapter.

Wraps the generated CoreV1Api/AppsV1Api interfaces of the official
``kubernetes`` client behind eight narrow read operations and projects
the verbose API objects into display records.

All methods are blocking: each one issues an independent HTTP call, so a
single client is safe to share between concurrent tool calls.
"""

from typing import Any, Callable, Optional, TypeVar

import yaml
from kubernetes import client as k8s_client
from kubernetes import config as k8s_config
from kubernetes.client.rest import ApiException

from k8s_mcp_server.config import KubernetesSettings
from k8s_mcp_server.k8s.formatting import format_age, format_port, format_ready
from k8s_mcp_server.k8s.types import (
    DeploymentInfo,
    InvalidResourceError,
    KubernetesClientError,
    KubernetesConfigError,
    NamespaceInfo,
    PodInfo,
    ResourceNotFoundError,
    ServiceInfo,
)
from k8s_mcp_server.utils import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def build_api_client(settings: KubernetesSettings) -> k8s_client.ApiClient:
    """
    Build an authenticated ApiClient.

    In-cluster mode uses the service account token and CA mounted into the
    pod; otherwise the kubeconfig file at ``settings.kubeconfig`` is loaded.

    Raises:
        KubernetesConfigError: If credentials cannot be loaded
    """
    configuration = k8s_client.Configuration()

    if settings.in_cluster:
        try:
            k8s_config.load_incluster_config(client_configuration=configuration)
        except k8s_config.ConfigException as e:
            raise KubernetesConfigError(f"failed to load in-cluster config: {e}") from e
    else:
        if not settings.kubeconfig:
            raise KubernetesConfigError(
                "kubeconfig path is required when not running in cluster"
            )
        try:
            k8s_config.load_kube_config(
                config_file=settings.kubeconfig,
                client_configuration=configuration,
                persist_config=False,
            )
        except (
            k8s_config.ConfigException,
            yaml.YAMLError,
            OSError,
            TypeError,
            ValueError,
        ) as e:
            # TypeError: top level of the file is not a mapping
            raise KubernetesConfigError(
                f"failed to load kubeconfig {settings.kubeconfig}: {e}"
            ) from e

    return k8s_client.ApiClient(configuration)


def _describe_error(exc: Exception) -> str:
    if isinstance(exc, ApiException):
        if exc.status == 404:
            return "not found"
        reason = exc.reason or "error"
        return f"{exc.status} {reason}" if exc.status else reason
    return str(exc) or exc.__class__.__name__


def _call(context: str, fn: Callable[[], T]) -> T:
    """
    Run one upstream API call, wrapping failures with operation context.

    Raises:
        ResourceNotFoundError: On HTTP 404
        KubernetesClientError: On any other failure
    """
    try:
        return fn()
    except ApiException as e:
        message = f"{context}: {_describe_error(e)}"
        if e.status == 404:
            raise ResourceNotFoundError(message) from e
        raise KubernetesClientError(message, status=e.status) from e
    except KubernetesClientError:
        raise
    except Exception as e:
        # urllib3 connection errors, TLS failures, malformed responses
        raise KubernetesClientError(f"{context}: {_describe_error(e)}") from e


# ---------------------------------------------------------------------------
# Projections
# ---------------------------------------------------------------------------

def build_pod_info(pod: Any) -> PodInfo:
    """Project a V1Pod into a PodInfo."""
    metadata = pod.metadata
    status = pod.status
    statuses = (status.container_statuses if status else None) or []

    ready = sum(1 for cs in statuses if cs.ready)
    restarts = sum(cs.restart_count or 0 for cs in statuses)

    return PodInfo(
        name=metadata.name or "",
        namespace=metadata.namespace or "",
        status=(status.phase if status else None) or "",
        ready=format_ready(ready, len(statuses)),
        restarts=restarts,
        age=format_age(metadata.creation_timestamp),
        labels=dict(metadata.labels or {}),
        node_name=(pod.spec.node_name if pod.spec else None) or "",
        pod_ip=(status.pod_ip if status else None) or "",
    )


def build_service_info(service: Any) -> ServiceInfo:
    """Project a V1Service into a ServiceInfo."""
    metadata = service.metadata
    spec = service.spec

    ports = [
        format_port(p.port, p.protocol, p.node_port)
        for p in ((spec.ports if spec else None) or [])
    ]

    external_ips: list[str] = []
    load_balancer = service.status.load_balancer if service.status else None
    for ingress in (load_balancer.ingress if load_balancer else None) or []:
        if ingress.ip:
            external_ips.append(ingress.ip)
        if ingress.hostname:
            external_ips.append(ingress.hostname)

    return ServiceInfo(
        name=metadata.name or "",
        namespace=metadata.namespace or "",
        type=(spec.type if spec else None) or "",
        cluster_ip=(spec.cluster_ip if spec else None) or "",
        ports=ports,
        age=format_age(metadata.creation_timestamp),
        external_ips=external_ips,
        labels=dict(metadata.labels or {}),
        selector=dict((spec.selector if spec else None) or {}),
    )


def build_deployment_info(deployment: Any) -> DeploymentInfo:
    """
    Project a V1Deployment into a DeploymentInfo.

    Raises:
        InvalidResourceError: If the deployment has no desired replica count
    """
    metadata = deployment.metadata
    desired = deployment.spec.replicas if deployment.spec else None
    if desired is None:
        raise InvalidResourceError(
            f"deployment {metadata.name} in namespace {metadata.namespace} "
            "has no desired replica count"
        )

    status = deployment.status
    ready = (status.ready_replicas if status else None) or 0

    return DeploymentInfo(
        name=metadata.name or "",
        namespace=metadata.namespace or "",
        ready=format_ready(ready, desired),
        up_to_date=(status.updated_replicas if status else None) or 0,
        available=(status.available_replicas if status else None) or 0,
        age=format_age(metadata.creation_timestamp),
        replicas=desired,
        labels=dict(metadata.labels or {}),
    )


def build_namespace_info(namespace: Any) -> NamespaceInfo:
    """Project a V1Namespace into a NamespaceInfo."""
    metadata = namespace.metadata
    return NamespaceInfo(
        name=metadata.name or "",
        status=(namespace.status.phase if namespace.status else None) or "",
        age=format_age(metadata.creation_timestamp),
        labels=dict(metadata.labels or {}),
    )


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------

class KubernetesClient:
    """
    Read-only view of a cluster.

    Lists keep the order returned by the API server. Named lookups raise
    ResourceNotFoundError when the object does not exist.
    """

    def __init__(self, core_v1: Any, apps_v1: Any):
        """
        Initialize the adapter.

        Args:
            core_v1: CoreV1Api (or a compatible fake)
            apps_v1: AppsV1Api (or a compatible fake)
        """
        self.core_v1 = core_v1
        self.apps_v1 = apps_v1

    @classmethod
    def from_settings(cls, settings: KubernetesSettings) -> "KubernetesClient":
        """
        Create a client from connection settings.

        Raises:
            KubernetesConfigError: If credentials cannot be loaded
        """
        api_client = build_api_client(settings)
        mode = "in-cluster" if settings.in_cluster else "kubeconfig"
        logger.info(
            "Kubernetes client configured",
            extra={"mode": mode, "host": api_client.configuration.host},
        )
        return cls(
            core_v1=k8s_client.CoreV1Api(api_client),
            apps_v1=k8s_client.AppsV1Api(api_client),
        )

    # Pods

    def list_pods(self, namespace: str) -> list[PodInfo]:
        """List pods in a namespace."""
        pods = _call(
            f"failed to list pods in namespace {namespace}",
            lambda: self.core_v1.list_namespaced_pod(namespace=namespace),
        )
        return [build_pod_info(pod) for pod in pods.items or []]

    def get_pod(self, namespace: str, name: str) -> PodInfo:
        """Get a pod by name."""
        pod = _call(
            f"failed to get pod {name} in namespace {namespace}",
            lambda: self.core_v1.read_namespaced_pod(name=name, namespace=namespace),
        )
        return build_pod_info(pod)

    def get_pod_logs(
        self, namespace: str, name: str, tail_lines: Optional[int] = None
    ) -> str:
        """
        Read a pod's logs to completion.

        Args:
            namespace: Pod namespace
            name: Pod name
            tail_lines: Only return this many trailing lines (None: all)

        Returns:
            Log text
        """
        kwargs: dict[str, Any] = {"name": name, "namespace": namespace}
        if tail_lines is not None:
            kwargs["tail_lines"] = tail_lines

        logs = _call(
            f"failed to get logs for pod {name} in namespace {namespace}",
            lambda: self.core_v1.read_namespaced_pod_log(**kwargs),
        )
        if isinstance(logs, bytes):
            return logs.decode("utf-8", errors="replace")
        return logs or ""

    # Services

    def list_services(self, namespace: str) -> list[ServiceInfo]:
        """List services in a namespace."""
        services = _call(
            f"failed to list services in namespace {namespace}",
            lambda: self.core_v1.list_namespaced_service(namespace=namespace),
        )
        return [build_service_info(svc) for svc in services.items or []]

    def get_service(self, namespace: str, name: str) -> ServiceInfo:
        """Get a service by name."""
        service = _call(
            f"failed to get service {name} in namespace {namespace}",
            lambda: self.core_v1.read_namespaced_service(name=name, namespace=namespace),
        )
        return build_service_info(service)

    # Deployments

    def list_deployments(self, namespace: str) -> list[DeploymentInfo]:
        """List deployments in a namespace."""
        deployments = _call(
            f"failed to list deployments in namespace {namespace}",
            lambda: self.apps_v1.list_namespaced_deployment(namespace=namespace),
        )
        return [build_deployment_info(d) for d in deployments.items or []]

    def get_deployment(self, namespace: str, name: str) -> DeploymentInfo:
        """Get a deployment by name."""
        deployment = _call(
            f"failed to get deployment {name} in namespace {namespace}",
            lambda: self.apps_v1.read_namespaced_deployment(name=name, namespace=namespace),
        )
        return build_deployment_info(deployment)

    # Namespaces

    def list_namespaces(self) -> list[NamespaceInfo]:
        """List all namespaces."""
        namespaces = _call(
            "failed to list namespaces",
            lambda: self.core_v1.list_namespace(),
        )
        return [build_namespace_info(ns) for ns in namespaces.items or []]
