"""
Type definitions for the cluster client adapter.

Display records are compact, JSON-ready projections of Kubernetes objects.
They are built fresh for every request and never mutated.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class PodInfo:
    """
    Simplified pod information.

    Attributes:
        name: Pod name
        namespace: Pod namespace
        status: Pod phase (Running, Pending, ...)
        ready: "ready/total" container statuses
        restarts: Sum of container restart counts
        age: Coarse age string ("5m", "3d")
        labels: Pod labels
        node_name: Node the pod is scheduled on
        pod_ip: Pod network address
    """

    name: str
    namespace: str
    status: str
    ready: str
    restarts: int
    age: str
    labels: dict[str, str] = field(default_factory=dict)
    node_name: str = ""
    pod_ip: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: dict[str, Any] = {
            "name": self.name,
            "namespace": self.namespace,
            "status": self.status,
            "ready": self.ready,
            "restarts": self.restarts,
            "age": self.age,
        }
        if self.labels:
            data["labels"] = dict(self.labels)
        if self.node_name:
            data["node_name"] = self.node_name
        if self.pod_ip:
            data["pod_ip"] = self.pod_ip
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PodInfo":
        return cls(
            name=data["name"],
            namespace=data["namespace"],
            status=data["status"],
            ready=data["ready"],
            restarts=data["restarts"],
            age=data["age"],
            labels=dict(data.get("labels") or {}),
            node_name=data.get("node_name", ""),
            pod_ip=data.get("pod_ip", ""),
        )


@dataclass(frozen=True)
class ServiceInfo:
    """Simplified service information."""

    name: str
    namespace: str
    type: str
    cluster_ip: str
    ports: list[str]
    age: str
    external_ips: list[str] = field(default_factory=list)
    labels: dict[str, str] = field(default_factory=dict)
    selector: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: dict[str, Any] = {
            "name": self.name,
            "namespace": self.namespace,
            "type": self.type,
            "cluster_ip": self.cluster_ip,
        }
        if self.external_ips:
            data["external_ips"] = list(self.external_ips)
        data["ports"] = list(self.ports)
        data["age"] = self.age
        if self.labels:
            data["labels"] = dict(self.labels)
        if self.selector:
            data["selector"] = dict(self.selector)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ServiceInfo":
        return cls(
            name=data["name"],
            namespace=data["namespace"],
            type=data["type"],
            cluster_ip=data["cluster_ip"],
            ports=list(data.get("ports") or []),
            age=data["age"],
            external_ips=list(data.get("external_ips") or []),
            labels=dict(data.get("labels") or {}),
            selector=dict(data.get("selector") or {}),
        )


@dataclass(frozen=True)
class DeploymentInfo:
    """Simplified deployment information."""

    name: str
    namespace: str
    ready: str
    up_to_date: int
    available: int
    age: str
    replicas: int
    labels: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: dict[str, Any] = {
            "name": self.name,
            "namespace": self.namespace,
            "ready": self.ready,
            "up_to_date": self.up_to_date,
            "available": self.available,
            "age": self.age,
        }
        if self.labels:
            data["labels"] = dict(self.labels)
        data["replicas"] = self.replicas
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DeploymentInfo":
        return cls(
            name=data["name"],
            namespace=data["namespace"],
            ready=data["ready"],
            up_to_date=data["up_to_date"],
            available=data["available"],
            age=data["age"],
            replicas=data["replicas"],
            labels=dict(data.get("labels") or {}),
        )


@dataclass(frozen=True)
class NamespaceInfo:
    """Simplified namespace information."""

    name: str
    status: str
    age: str
    labels: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: dict[str, Any] = {
            "name": self.name,
            "status": self.status,
            "age": self.age,
        }
        if self.labels:
            data["labels"] = dict(self.labels)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NamespaceInfo":
        return cls(
            name=data["name"],
            status=data["status"],
            age=data["age"],
            labels=dict(data.get("labels") or {}),
        )


class KubernetesError(Exception):
    """Base exception for cluster client errors."""

    pass


class KubernetesConfigError(KubernetesError):
    """Raised when the cluster client cannot be configured."""

    pass


class KubernetesClientError(KubernetesError):
    """
    Raised when a cluster API call fails.

    The message carries the operation context (resource, namespace);
    the upstream HTTP status is kept when there is one.
    """

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ResourceNotFoundError(KubernetesClientError):
    """Raised when a named resource does not exist."""

    def __init__(self, message: str):
        super().__init__(message, status=404)


class InvalidResourceError(KubernetesClientError):
    """Raised when an upstream object lacks a field the projection needs."""

    pass
