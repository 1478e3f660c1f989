"""
Cluster client adapter.

This module handles:
- Authenticating to a cluster (kubeconfig or in-cluster credentials)
- Read-only list/get calls for pods, services, deployments and namespaces
- Projecting API objects into compact display records
"""

from k8s_mcp_server.k8s.types import (
    DeploymentInfo,
    InvalidResourceError,
    KubernetesClientError,
    KubernetesConfigError,
    KubernetesError,
    NamespaceInfo,
    PodInfo,
    ResourceNotFoundError,
    ServiceInfo,
)
from k8s_mcp_server.k8s.formatting import format_age
from k8s_mcp_server.k8s.client import KubernetesClient, build_api_client

__all__ = [
    # Records
    "PodInfo",
    "ServiceInfo",
    "DeploymentInfo",
    "NamespaceInfo",
    # Exceptions
    "KubernetesError",
    "KubernetesConfigError",
    "KubernetesClientError",
    "ResourceNotFoundError",
    "InvalidResourceError",
    # Client
    "KubernetesClient",
    "build_api_client",
    "format_age",
]
